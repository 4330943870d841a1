"""
Tests for the football lexicon (team/league variations, actions, temporal
expressions, qualifiers).
"""

import pytest

from futbol_nlq.api.name_variations import (
    LEAGUE_DICTIONARY,
    TEAM_DICTIONARY,
    TemporalExpression,
    extract_qualifiers,
    extract_temporal,
    find_league,
    find_team,
    get_variations_stats,
    normalize_action,
)


class TestFindTeam:
    """Test suite for find_team."""

    @pytest.mark.parametrize("entry", list(TEAM_DICTIONARY.values()), ids=list(TEAM_DICTIONARY))
    def test_exact_official_name(self, entry):
        """Every official name resolves to its own entry."""
        assert find_team(entry.official) == entry

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("partidos del barça", "Barcelona"),
            ("los merengues ganaron", "Real Madrid"),
            ("cómo le fue al atleti", "Atletico Madrid"),
            ("resultado del man city", "Manchester City"),
            ("la juve juega hoy", "Juventus"),
            ("el bvb perdió", "Borussia Dortmund"),
            ("xeneizes", "Boca Juniors"),
        ],
    )
    def test_variations(self, query, expected):
        """Colloquial names map to the official entry."""
        assert find_team(query).official == expected

    def test_case_insensitive(self):
        assert find_team("REAL MADRID").official == "Real Madrid"
        assert find_team("Barça").official == "Barcelona"

    def test_shared_variation_goes_to_first_entry(self):
        """'fcb' is declared by Barcelona and Bayern; Barcelona comes first."""
        assert find_team("fcb").official == "Barcelona"
        assert find_team("bayern").official == "Bayern Munich"

    def test_official_name_beats_earlier_variation(self):
        """An official name wins over a variation of an earlier entry."""
        # "city" alone would be Manchester City
        assert find_team("manchester united vs city").official == "Manchester United"

    def test_team_carries_league_and_country(self):
        team = find_team("liverpool")
        assert team.league == "Premier League"
        assert team.country == "England"

    def test_no_match(self):
        assert find_team("clasificacion de la premier") is None
        assert find_team("") is None


class TestFindLeague:
    """Test suite for find_league."""

    def test_official_names(self):
        for entry in LEAGUE_DICTIONARY.values():
            assert find_league(entry.official) == entry

    def test_bundesliga_is_not_la_liga(self):
        """'bundesliga' contains La Liga's variation 'liga'."""
        assert find_league("tabla de la bundesliga").official == "Bundesliga"

    def test_plain_liga_is_la_liga(self):
        assert find_league("goleadores de la liga").official == "La Liga"

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("premier", "Premier League"),
            ("la champions", "UEFA Champions League"),
            ("calcio", "Serie A"),
            ("futbol de mexico", "Liga MX"),
            ("betplay", "Liga BetPlay"),
        ],
    )
    def test_variations(self, query, expected):
        assert find_league(query).official == expected

    def test_no_match(self):
        assert find_league("partidos del barcelona") is None


class TestNormalizeAction:
    """Test suite for normalize_action."""

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("clasificacion", "standings"),
            ("tabla de posiciones", "standings"),
            ("goleadores", "scorers"),
            ("goles de messi", "goals"),
            ("asistencias", "assists"),
            ("partidos", "matches"),
            ("calendario", "fixtures"),
            ("en vivo", "live"),
            ("resultados", "results"),
            ("estadisticas", "stats"),
            ("racha", "form"),
            ("noticias", "news"),
        ],
    )
    def test_synonyms(self, query, expected):
        assert normalize_action(query) == expected

    def test_scorers_not_read_as_goals(self):
        """'goleadores' contains 'gol' but normalizes to scorers."""
        assert normalize_action("maximos goleadores") == "scorers"

    def test_first_action_in_table_order_wins(self):
        """'partidos en vivo' mentions matches and live; matches is declared first."""
        assert normalize_action("partidos en vivo") == "matches"

    def test_matches_before_standings(self):
        assert normalize_action("partidos y clasificacion") == "matches"
        assert normalize_action("goles y tabla") == "goals"

    def test_no_action(self):
        assert normalize_action("hola") is None


class TestExtractTemporal:
    """Test suite for extract_temporal."""

    def test_last_n(self):
        assert extract_temporal("últimos 5 partidos") == TemporalExpression("last_n", 5)
        assert extract_temporal("ultimos 10") == TemporalExpression("last_n", 10)

    def test_next_n(self):
        assert extract_temporal("próximos 3 partidos") == TemporalExpression("next_n", 3)

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("partidos de hoy", "today"),
            ("qué pasó ayer", "yesterday"),
            ("juega mañana", "tomorrow"),
            ("esta semana", "this_week"),
            ("este mes", "this_month"),
            ("esta temporada", "this_season"),
        ],
    )
    def test_named_periods(self, query, expected):
        temporal = extract_temporal(query)
        assert temporal.type == expected
        assert temporal.value is None

    def test_none(self):
        assert extract_temporal("clasificacion de la liga") is None

    def test_to_dict_omits_missing_value(self):
        assert TemporalExpression("today").to_dict() == {"type": "today"}
        assert TemporalExpression("last_n", 5).to_dict() == {"type": "last_n", "value": 5}


class TestQualifiersAndStats:
    """Test suite for qualifiers and lexicon statistics."""

    def test_multiple_qualifiers(self):
        qualifiers = extract_qualifiers("partidos en casa sin penales")
        assert qualifiers == ["home_only", "without_penalties"]

    def test_no_qualifiers(self):
        assert extract_qualifiers("goleadores de la liga") == []

    def test_variations_stats(self):
        stats = get_variations_stats()
        assert stats["teams"] == 16
        assert stats["leagues"] == 9
        assert stats["actions"] == 11
        assert stats["team_variations"] > stats["teams"]
