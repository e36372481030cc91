"""Registry of the leagues running under one organizing context."""

import logging
from typing import Dict, Hashable, List

from src.draft_engine.errors import LeagueNameInUseError, LeagueNotFoundError
from src.draft_engine.league import League

logger = logging.getLogger(__name__)


class DraftRegistry:
    """Holds any number of independent leagues, keyed by league name.

    Users refer to a league by name in their commands, which lets the same
    person take part in several drafts at once. No two leagues in a
    registry may share a name.

    The registry does no locking. If several callers can reach the same
    league concurrently, serialize access per league outside of it.
    """

    def __init__(self, registry_id: Hashable):
        self.registry_id = registry_id
        self._leagues: Dict[str, League] = {}

    def __len__(self) -> int:
        return len(self._leagues)

    def __contains__(self, name: str) -> bool:
        return name in self._leagues

    def add_league(self, league: League) -> Dict[str, League]:
        """Register *league* and return the registry's leagues by name."""
        if league.name in self._leagues:
            raise LeagueNameInUseError(
                f"A league named '{league.name}' already exists"
            )
        self._leagues[league.name] = league
        logger.info(
            "Registry %s: added league '%s' (%d participants, %s)",
            self.registry_id,
            league.name,
            len(league.participants),
            league.draft_type,
        )
        return dict(self._leagues)

    def league_by_name(self, name: str) -> League:
        try:
            return self._leagues[name]
        except KeyError:
            raise LeagueNotFoundError(f"No league named '{name}'") from None

    def league_by_id(self, league_id: Hashable) -> League:
        for league in self._leagues.values():
            if league.league_id == league_id:
                return league
        raise LeagueNotFoundError(f"No league with id {league_id}")

    def delete_league(self, name: str) -> League:
        """Remove a league by name and return it."""
        league = self.league_by_name(name)
        del self._leagues[name]
        logger.info("Registry %s: deleted league '%s'", self.registry_id, name)
        return league

    def delete_league_by_id(self, league_id: Hashable) -> League:
        league = self.league_by_id(league_id)
        return self.delete_league(league.name)

    def clear_leagues(self) -> List[League]:
        """Remove every league and return the removed leagues."""
        leagues = list(self._leagues.values())
        self._leagues.clear()
        logger.info(
            "Registry %s: cleared %d leagues", self.registry_id, len(leagues)
        )
        return leagues

    def league_names(self) -> List[str]:
        return sorted(self._leagues)
