"""
Name Variations and Synonyms for Football Entities

Provides the static tables used for all substring-based matching in the
query parser: colloquial team and league names (Spanish and English),
action synonyms, temporal expressions and result qualifiers.

Tables are ordered. Insertion order is the priority order: when a query
matches several entries, the entry declared first wins. Nothing here is
mutated at runtime.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Pattern, Tuple, TypeVar


@dataclass(frozen=True)
class TeamVariations:
    official: str
    variations: Tuple[str, ...]
    league: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class LeagueVariations:
    official: str
    variations: Tuple[str, ...]
    country: Optional[str] = None


_Entry = TypeVar("_Entry", TeamVariations, LeagueVariations)


@dataclass(frozen=True)
class TemporalExpression:
    """Relative time phrase found in a query ("últimos 5" -> last_n, 5)."""

    type: str
    value: Optional[int] = None

    def to_dict(self) -> Dict[str, Optional[int]]:
        data = {"type": self.type}
        if self.value is not None:
            data["value"] = self.value
        return data


# ============================================================================
# TEAM NAME VARIATIONS
# ============================================================================
# Variations are lowercase and matched as substrings of the lowercased query.

TEAM_DICTIONARY: Dict[str, TeamVariations] = {
    # La Liga
    "real_madrid": TeamVariations(
        official="Real Madrid",
        variations=("madrid", "real", "merengues", "blancos", "rm", "rmcf"),
        league="La Liga",
        country="Spain",
    ),
    "barcelona": TeamVariations(
        official="Barcelona",
        variations=("barça", "barca", "fcb", "azulgrana", "culés", "blaugrana"),
        league="La Liga",
        country="Spain",
    ),
    "atletico_madrid": TeamVariations(
        official="Atletico Madrid",
        variations=("atleti", "atletico", "colchoneros", "atm"),
        league="La Liga",
        country="Spain",
    ),

    # Premier League
    "manchester_united": TeamVariations(
        official="Manchester United",
        variations=("united", "man utd", "man u", "mufc", "red devils", "diablos rojos"),
        league="Premier League",
        country="England",
    ),
    "manchester_city": TeamVariations(
        official="Manchester City",
        variations=("city", "man city", "mcfc", "citizens"),
        league="Premier League",
        country="England",
    ),
    "liverpool": TeamVariations(
        official="Liverpool",
        variations=("lfc", "reds", "pool"),
        league="Premier League",
        country="England",
    ),
    "chelsea": TeamVariations(
        official="Chelsea",
        variations=("blues", "cfc"),
        league="Premier League",
        country="England",
    ),
    "arsenal": TeamVariations(
        official="Arsenal",
        variations=("gunners", "afc"),
        league="Premier League",
        country="England",
    ),

    # Serie A
    "juventus": TeamVariations(
        official="Juventus",
        variations=("juve", "vecchia signora", "bianconeri"),
        league="Serie A",
        country="Italy",
    ),
    "inter": TeamVariations(
        official="Inter Milan",
        variations=("inter", "internazionale", "nerazzurri"),
        league="Serie A",
        country="Italy",
    ),
    "ac_milan": TeamVariations(
        official="AC Milan",
        variations=("milan", "rossoneri", "acm"),
        league="Serie A",
        country="Italy",
    ),

    # Bundesliga
    "bayern_munich": TeamVariations(
        official="Bayern Munich",
        variations=("bayern", "fcb", "baviera"),  # "fcb" is claimed by Barcelona first
        league="Bundesliga",
        country="Germany",
    ),
    "borussia_dortmund": TeamVariations(
        official="Borussia Dortmund",
        variations=("dortmund", "bvb", "borussen"),
        league="Bundesliga",
        country="Germany",
    ),

    # Ligue 1
    "psg": TeamVariations(
        official="Paris Saint-Germain",
        variations=("psg", "paris", "saint germain"),
        league="Ligue 1",
        country="France",
    ),

    # South America
    "boca_juniors": TeamVariations(
        official="Boca Juniors",
        variations=("boca", "xeneizes"),
        league="Liga Argentina",
        country="Argentina",
    ),
    "river_plate": TeamVariations(
        official="River Plate",
        variations=("river", "millonarios"),
        league="Liga Argentina",
        country="Argentina",
    ),
}


# ============================================================================
# LEAGUE NAME VARIATIONS
# ============================================================================

LEAGUE_DICTIONARY: Dict[str, LeagueVariations] = {
    "premier_league": LeagueVariations(
        official="Premier League",
        variations=("premier", "epl", "liga inglesa", "premier league inglesa"),
        country="England",
    ),
    "la_liga": LeagueVariations(
        official="La Liga",
        variations=("liga española", "primera division", "laliga", "liga"),
        country="Spain",
    ),
    "serie_a": LeagueVariations(
        official="Serie A",
        variations=("serie a italiana", "calcio"),
        country="Italy",
    ),
    "bundesliga": LeagueVariations(
        official="Bundesliga",
        variations=("liga alemana", "bundesliga alemana"),
        country="Germany",
    ),
    "ligue_1": LeagueVariations(
        official="Ligue 1",
        variations=("liga francesa", "ligue 1 francesa"),
        country="France",
    ),
    "champions_league": LeagueVariations(
        official="UEFA Champions League",
        variations=("champions", "ucl", "copa de europa", "champions league"),
        country="Europe",
    ),
    "europa_league": LeagueVariations(
        official="UEFA Europa League",
        variations=("europa", "uel"),
        country="Europe",
    ),
    "liga_mx": LeagueVariations(
        official="Liga MX",
        variations=("liga mexicana", "mexico"),
        country="Mexico",
    ),
    "liga_colombiana": LeagueVariations(
        official="Liga BetPlay",
        variations=("liga colombia", "colombia", "betplay"),
        country="Colombia",
    ),
}


# ============================================================================
# ACTION SYNONYMS
# ============================================================================
# Order is the tie-break when a query mentions several actions.
# "scorers" precedes "goals" so "goleadores" is not read as "gol".

ACTION_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "scorers": ("goleadores", "artilleros", "maximos goleadores", "top scorers"),
    "goals": ("goles", "tantos", "anotaciones", "dianas", "gol"),
    "assists": ("asistencias", "pases gol", "asistencia"),
    "matches": ("partidos", "juegos", "encuentros", "partido", "match"),
    "standings": ("clasificacion", "clasificación", "tabla", "posiciones", "tabla de posiciones"),
    "fixtures": ("calendario", "proximos partidos", "programacion"),
    "live": ("en vivo", "directo", "live", "ahora"),
    "results": ("resultados", "marcadores", "scores"),
    "stats": ("estadisticas", "numeros", "datos"),
    "form": ("racha", "forma", "ultimos resultados"),
    "news": ("noticias", "novedades", "ultimas noticias"),
}


# ============================================================================
# TEMPORAL EXPRESSIONS
# ============================================================================

TEMPORAL_PATTERNS: Dict[str, Pattern[str]] = {
    "last_n": re.compile(r"(?:[uú]ltimos?|pasados?)\s+(\d+)", re.IGNORECASE),
    "next_n": re.compile(r"(?:pr[oó]ximos?|siguientes?)\s+(\d+)", re.IGNORECASE),
    "this_week": re.compile(r"esta\s+semana", re.IGNORECASE),
    "this_month": re.compile(r"este\s+mes", re.IGNORECASE),
    "this_season": re.compile(r"esta\s+(?:temporada|season)", re.IGNORECASE),
    "today": re.compile(r"hoy|today", re.IGNORECASE),
    "yesterday": re.compile(r"ayer|yesterday", re.IGNORECASE),
    "tomorrow": re.compile(r"mañana|tomorrow", re.IGNORECASE),
}


# ============================================================================
# QUALIFIERS
# ============================================================================

QUALIFIERS: Dict[str, Pattern[str]] = {
    "home_only": re.compile(r"(?:en\s+casa|como\s+local|de\s+local)", re.IGNORECASE),
    "away_only": re.compile(r"(?:fuera|como\s+visitante|de\s+visitante)", re.IGNORECASE),
    "without_penalties": re.compile(r"sin\s+(?:penales|penaltis)", re.IGNORECASE),
    "only_league": re.compile(r"solo\s+(?:en\s+)?(?:la\s+)?liga", re.IGNORECASE),
    "only_champions": re.compile(r"solo\s+(?:en\s+)?champions", re.IGNORECASE),
}


# ============================================================================
# LOOKUP FUNCTIONS
# ============================================================================


def _scan(query: str, entries: Iterable[_Entry]) -> Optional[_Entry]:
    # Official names are checked across the whole table before any colloquial
    # variation, so "bundesliga" is not taken as La Liga's "liga".
    query_lower = query.lower().strip()

    for entry in entries:
        official = entry.official.lower()
        if query_lower == official or official in query_lower:
            return entry

    for entry in entries:
        if any(variation in query_lower for variation in entry.variations):
            return entry

    return None


def find_team(query: str) -> Optional[TeamVariations]:
    """
    Find the team mentioned in a query.

    An official name anywhere in the query wins; otherwise the first team
    (in table order) with a variation contained in the query is returned.

    Args:
        query: Raw query text (any case)

    Returns:
        TeamVariations entry or None

    Examples:
        >>> find_team("partidos del barça").official
        'Barcelona'
        >>> find_team("clasificacion de la premier") is None
        True
    """
    return _scan(query, TEAM_DICTIONARY.values())


def find_league(query: str) -> Optional[LeagueVariations]:
    """Find the league mentioned in a query (same rules as find_team)."""
    return _scan(query, LEAGUE_DICTIONARY.values())


def normalize_action(query: str) -> Optional[str]:
    """
    Normalize the action mentioned in a query to its canonical name.

    The first action in ACTION_SYNONYMS with a synonym contained in the
    query wins, even if a later action also matches.
    """
    query_lower = query.lower()

    for action, synonyms in ACTION_SYNONYMS.items():
        for synonym in synonyms:
            if synonym in query_lower:
                return action

    return None


def extract_temporal(query: str) -> Optional[TemporalExpression]:
    """
    Extract the first relative time expression from a query.

    Patterns are case-insensitive, so the raw text is searched as-is.

    Examples:
        >>> extract_temporal("últimos 5 partidos")
        TemporalExpression(type='last_n', value=5)
        >>> extract_temporal("partidos de hoy")
        TemporalExpression(type='today', value=None)
    """
    for temporal_type, pattern in TEMPORAL_PATTERNS.items():
        match = pattern.search(query)
        if match:
            value = int(match.group(1)) if match.groups() and match.group(1) else None
            return TemporalExpression(type=temporal_type, value=value)

    return None


def extract_qualifiers(query: str) -> List[str]:
    """Return every qualifier that matches the query, in table order."""
    return [name for name, pattern in QUALIFIERS.items() if pattern.search(query)]


# ============================================================================
# STATISTICS
# ============================================================================


def get_variations_stats() -> Dict[str, int]:
    """
    Get statistics about the lexicon.

    Returns:
        Dictionary with counts of entries, variations and synonyms
    """
    return {
        "teams": len(TEAM_DICTIONARY),
        "team_variations": sum(len(t.variations) for t in TEAM_DICTIONARY.values()),
        "leagues": len(LEAGUE_DICTIONARY),
        "league_variations": sum(len(l.variations) for l in LEAGUE_DICTIONARY.values()),
        "actions": len(ACTION_SYNONYMS),
        "action_synonyms": sum(len(s) for s in ACTION_SYNONYMS.values()),
        "temporal_patterns": len(TEMPORAL_PATTERNS),
        "qualifiers": len(QUALIFIERS),
    }
