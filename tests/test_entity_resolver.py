"""
Tests for team/league id resolution.
"""

import pytest

from futbol_nlq.api.entity_resolver import (
    LEAGUE_IDS,
    TEAM_IDS,
    calculate_match_confidence,
    resolve_entity,
    resolve_league_id,
    resolve_team_id,
    suggest_leagues,
    suggest_teams,
)
from futbol_nlq.api.errors import EntityNotFoundError, ErrorCode
from futbol_nlq.api.models import EntityReference
from futbol_nlq.api.name_variations import LEAGUE_DICTIONARY, TEAM_DICTIONARY


class TestIdTables:
    """Every lexicon entry has an id."""

    def test_all_teams_have_ids(self):
        for team in TEAM_DICTIONARY.values():
            assert team.official in TEAM_IDS

    def test_all_leagues_have_ids(self):
        for league in LEAGUE_DICTIONARY.values():
            assert league.official in LEAGUE_IDS

    def test_team_leagues_have_ids(self):
        """Leagues inferred from a team can be resolved too."""
        for team in TEAM_DICTIONARY.values():
            assert resolve_league_id(team.league) is not None


class TestResolveIds:
    """resolve_team_id / resolve_league_id."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Barcelona", 529),
            ("barcelona", 529),
            ("Barça", 529),
            ("Man City", 50),
            ("  Real Madrid ", 541),
            ("xeneizes", 451),
        ],
    )
    def test_team(self, name, expected):
        assert resolve_team_id(name) == expected

    def test_unknown_team(self):
        assert resolve_team_id("desconocido") is None

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Premier League", 39),
            ("la liga", 140),
            ("Bundesliga", 78),
            ("champions", 2),
            ("Liga Argentina", 128),
        ],
    )
    def test_league(self, name, expected):
        assert resolve_league_id(name) == expected

    def test_unknown_league(self):
        assert resolve_league_id("xyz") is None


class TestResolveEntity:
    """resolve_entity returns references or raises with suggestions."""

    def test_exact_team(self):
        ref = resolve_entity("Barcelona")
        assert isinstance(ref, EntityReference)
        assert ref.entity_type == "team"
        assert ref.entity_id == 529
        assert ref.country == "Spain"
        assert ref.confidence == 1.0
        assert "barça" in ref.alternate_names

    def test_variation_lower_confidence(self):
        ref = resolve_entity("barça")
        assert ref.name == "Barcelona"
        assert ref.confidence == 0.9

    def test_league(self):
        ref = resolve_entity("premier")
        assert ref.entity_type == "league"
        assert ref.entity_id == 39
        assert ref.country == "England"

    def test_league_without_lexicon_entry(self):
        ref = resolve_entity("Liga Argentina", entity_type="league")
        assert ref.entity_id == 128
        assert ref.country is None
        assert ref.alternate_names == []

    def test_type_filter(self):
        with pytest.raises(EntityNotFoundError):
            resolve_entity("premier", entity_type="team")

    def test_not_found(self):
        with pytest.raises(EntityNotFoundError) as exc_info:
            resolve_entity("xyzzy")
        error = exc_info.value
        assert error.code == ErrorCode.ENTITY_NOT_FOUND
        assert len(error.details["suggestions"]) == 3
        assert error.to_dict()["details"]["query"] == "xyzzy"


class TestSuggestions:
    """Similarity-based suggestions."""

    def test_confidence(self):
        assert calculate_match_confidence("Chelsea", "chelsea") == 1.0
        assert calculate_match_confidence("abc", "xyz") == 0.0

    def test_closest_team_first(self):
        assert suggest_teams("Barcelon")[0] == "Barcelona"
        assert suggest_teams("Liverpol", limit=1) == ["Liverpool"]

    def test_closest_league_first(self):
        assert suggest_leagues("Bundeslig")[0] == "Bundesliga"
