# futbol_nlq/nlq/mock_tools.py
"""
In-memory data source for the CLI and tests, without real API-Football calls.

Payloads follow the API-Football v3 response shape. The fetcher builds the
same RequestPlan a real adapter would, so unsupported intents and missing
entities fail exactly as they would against the live service.
"""

import copy
import logging
from typing import Any, Dict, List, Optional

from .parser import ExtractedEntities
from .planner import RequestPlan, build_request

logger = logging.getLogger(__name__)


def _fixture(fixture_id, status, home, away, home_goals, away_goals, league="La Liga"):
    return {
        "fixture": {"id": fixture_id, "date": "2024-10-20T19:00:00+00:00", "status": {"short": status}},
        "league": {"name": league, "season": 2024},
        "teams": {"home": {"name": home}, "away": {"name": away}},
        "goals": {"home": home_goals, "away": away_goals},
    }


def _standing(rank, team, points, goals_diff, form):
    return {
        "rank": rank,
        "team": {"name": team},
        "points": points,
        "goalsDiff": goals_diff,
        "form": form,
    }


def _player(name, team, goals, assists, appearances, rating):
    return {
        "player": {"name": name},
        "statistics": [
            {
                "team": {"name": team},
                "league": {"name": "La Liga", "season": 2024},
                "games": {"appearences": appearances, "rating": rating},
                "goals": {"total": goals, "assists": assists},
            }
        ],
    }


SAMPLE_PAYLOADS: Dict[str, Dict[str, Any]] = {
    "fixtures": {
        "response": [
            _fixture(1, "FT", "Barcelona", "Sevilla", 5, 1),
            _fixture(2, "FT", "Alaves", "Barcelona", 0, 3),
            _fixture(3, "FT", "Barcelona", "Real Madrid", 4, 0),
            _fixture(4, "FT", "Real Sociedad", "Barcelona", 1, 0),
            _fixture(5, "NS", "Barcelona", "Espanyol", None, None),
        ]
    },
    "live": {
        "response": [
            _fixture(10, "2H", "Arsenal", "Chelsea", 1, 1, league="Premier League"),
            _fixture(11, "HT", "Napoli", "Juventus", 0, 1, league="Serie A"),
        ]
    },
    "standings": {
        "response": [
            {
                "league": {
                    "name": "La Liga",
                    "season": 2024,
                    "standings": [
                        [
                            _standing(1, "Barcelona", 33, 26, "WWLWW"),
                            _standing(2, "Real Madrid", 27, 14, "WWWDW"),
                            _standing(3, "Villarreal", 24, 4, "WDWLW"),
                            _standing(4, "Atletico Madrid", 23, 12, "DWWDL"),
                            _standing(5, "Valencia", 7, -10, "LLDLD"),
                            _standing(6, "Las Palmas", 6, -9, "LDLLW"),
                            _standing(7, "Real Valladolid", 6, -16, "LLLDL"),
                        ]
                    ],
                }
            }
        ]
    },
    "topscorers": {
        "response": [
            _player("R. Lewandowski", "Barcelona", 15, 3, 13, "7.9"),
            _player("K. Mbappé", "Real Madrid", 12, 1, 13, "7.4"),
            _player("A. Budimir", "Osasuna", 7, 1, 13, "7.1"),
        ]
    },
    "player_stats": {
        "response": [
            _player("R. Lewandowski", "Barcelona", 15, 3, 13, "7.9"),
        ]
    },
    "team_info": {
        "response": [
            {
                "team": {"id": 529, "name": "Barcelona", "country": "Spain", "founded": 1899},
                "venue": {"name": "Estadi Olímpic Lluís Companys", "city": "Barcelona"},
            }
        ]
    },
    "league_info": {
        "response": [
            {
                "league": {"id": 140, "name": "La Liga", "type": "League"},
                "country": {"name": "Spain"},
            }
        ]
    },
}


class MockFootballFetcher:
    """
    Data source serving canned payloads per intent.

    Args:
        payloads: Per-intent payloads overriding the samples
        error: Exception raised on every fetch, to simulate a failing source
    """

    def __init__(
        self,
        payloads: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ):
        self.payloads = dict(SAMPLE_PAYLOADS)
        if payloads:
            self.payloads.update(payloads)
        self.error = error
        self.requests: List[RequestPlan] = []

    def fetch(self, intent: str, entities: ExtractedEntities) -> Any:
        plan = build_request(intent, entities)
        self.requests.append(plan)
        logger.debug(f"Mock fetch: {plan.to_path()}")

        if self.error is not None:
            raise self.error

        # Callers must never see (or mutate) the shared samples
        return copy.deepcopy(self.payloads.get(intent, {"response": []}))
