"""Shared fixtures for the draft engine test suite."""

from dataclasses import dataclass

import pytest

from src.draft_engine.league import League


@dataclass(frozen=True)
class Pokemon:
    """A drafted thing with more to it than a name."""

    name: str
    type: str = "normal"


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def pokemon():
    """Factory for items: ``pokemon("Pikachu")``."""
    return Pokemon


@pytest.fixture
def two_player_league():
    """Active two-seat snake league, three picks each."""
    league = League([69420, 42069], league_id=1, name="Creenis", team_size=3)
    league.activate()
    return league


@pytest.fixture
def four_player_league():
    """Active four-seat snake league, two picks each."""
    league = League(["a", "b", "c", "d"], league_id=2, name="Cheenis", team_size=2)
    league.activate()
    return league
