"""
Tests for entity extraction from free-text queries.
"""

from datetime import date

import pytest

from futbol_nlq.api.name_variations import TemporalExpression
from futbol_nlq.nlq.parser import ExtractedEntities, extract_entities, extract_player
from futbol_nlq.utils.season_utils import current_season, extract_season_year, format_season_label


class TestTeamAndLeague:
    """Team/league extraction and league inference."""

    def test_team_infers_league(self):
        entities = extract_entities("partidos de Barcelona")
        assert entities.team == "Barcelona"
        assert entities.league == "La Liga"

    def test_explicit_league_overrides_inferred(self):
        entities = extract_entities("partidos del real madrid en la bundesliga")
        assert entities.team == "Real Madrid"
        assert entities.league == "Bundesliga"

    def test_league_only(self):
        entities = extract_entities("clasificacion de la premier league")
        assert entities.team is None
        assert entities.league == "Premier League"

    def test_nothing_found_is_not_an_error(self):
        entities = extract_entities("hola")
        assert entities.team is None
        assert entities.league is None
        assert entities.player is None
        assert entities.temporal is None
        assert entities.qualifiers == []


class TestPlayerExtraction:
    """Player name templates and stop words."""

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("goles de Messi", "Messi"),
            ("stats del Pedri", "Pedri"),
            ("jugador Vinicius en la liga", "Vinicius"),
            ("estadisticas de Pedri con el equipo", "Pedri"),
        ],
    )
    def test_templates(self, query, expected):
        assert extract_player(query) == expected

    def test_stop_word_is_discarded(self):
        """'la' alone is never a player name."""
        assert extract_player("estadisticas de la") is None

    def test_no_player(self):
        assert extract_player("clasificacion de la liga") is None

    def test_player_kept_in_entities(self):
        assert extract_entities("goles de Messi").player == "Messi"


class TestSeason:
    """Season detection."""

    def test_explicit_year(self):
        assert extract_entities("goleadores de la premier 2023").season == 2023

    def test_defaults_to_current_year(self):
        assert extract_entities("goleadores de la premier").season == current_season()

    def test_reference_date_override(self):
        assert extract_entities("tabla", today=date(2030, 1, 15)).season == 2030

    def test_same_value_on_repeat(self):
        first = extract_entities("partidos de hoy").season
        second = extract_entities("partidos de hoy").season
        assert first == second

    def test_season_helpers(self):
        assert extract_season_year("temporada 2019") == 2019
        assert extract_season_year("1999") is None
        assert format_season_label(2024) == "2024-25"
        assert format_season_label(2099) == "2099-00"


class TestTemporalAndQualifiers:
    """Optional entities only appear when present."""

    def test_temporal(self):
        entities = extract_entities("últimos 5 partidos del Arsenal")
        assert entities.temporal == TemporalExpression("last_n", 5)

    def test_qualifiers(self):
        entities = extract_entities("partidos del barcelona en casa")
        assert entities.qualifiers == ["home_only"]


class TestExtractedEntities:
    """ExtractedEntities helpers."""

    def test_to_dict_omits_unset_fields(self):
        entities = ExtractedEntities(season=2024, league="La Liga")
        assert entities.to_dict() == {"league": "La Liga", "season": 2024}

    def test_to_dict_full(self):
        entities = ExtractedEntities(
            season=2024,
            team="Barcelona",
            team_id=529,
            temporal=TemporalExpression("next_n", 3),
            qualifiers=["home_only"],
        )
        assert entities.to_dict() == {
            "team": "Barcelona",
            "team_id": 529,
            "season": 2024,
            "temporal": {"type": "next_n", "value": 3},
            "qualifiers": ["home_only"],
        }

    def test_copy_is_independent(self):
        original = ExtractedEntities(season=2024, qualifiers=["home_only"])
        clone = original.copy()
        clone.team = "Chelsea"
        clone.qualifiers.append("away_only")
        assert original.team is None
        assert original.qualifiers == ["home_only"]
        assert clone == ExtractedEntities(
            season=2024, team="Chelsea", qualifiers=["home_only", "away_only"]
        )
