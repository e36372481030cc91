"""League - a single draft over a shared pool of uniquely-named items."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Hashable, List, Optional, Sequence, Tuple

from src.draft_engine.config import DEFAULT_DRAFT_TYPE, DEFAULT_TEAM_SIZE
from src.draft_engine.draft_item import DraftItem
from src.draft_engine.draft_types import DRAFT_TYPES, next_seat
from src.draft_engine.errors import (
    DraftCompleteError,
    ItemInUseError,
    ItemNotFoundError,
    InvalidTradeError,
    LeagueActiveError,
    LeagueInactiveError,
    NoPicksError,
    ParticipantNotFoundError,
    PicksEmptyError,
    QueueEmptyError,
)
from src.draft_engine.participant import Participant

logger = logging.getLogger(__name__)

# (participant_id, item_name) in the order the picks were made
LockedPick = Tuple[Hashable, str]


@dataclass
class Pick:
    """Represents a single pick in the league's history."""

    pick_number: int
    round: int
    seat: int
    participant_id: Hashable
    item_name: str
    timestamp: str
    queued: bool = False  # Resolved automatically from the participant's queue

    @classmethod
    def create(
        cls,
        pick_number: int,
        round: int,
        seat: int,
        participant_id: Hashable,
        item_name: str,
        queued: bool = False,
    ):
        return cls(
            pick_number=pick_number,
            round=round,
            seat=seat,
            participant_id=participant_id,
            item_name=item_name,
            timestamp=datetime.now().isoformat(),
            queued=queued,
        )


class League:
    """A specific draft league.

    The participants' order is the draft order: index 0 picks first. A
    League is created inactive; call ``activate()`` to open the draft. While
    active only picks are accepted, and once the draft is over (or has been
    deactivated by hand) waivers and trades are allowed instead.

    Supported draft types:

    * ``"snake"`` - the pool is passed down the table and back, with the
      drafter at each end picking twice in a row at the turn.
    * ``"linear"`` - the pool is passed around in a circle.
    """

    def __init__(
        self,
        participant_ids: Sequence[Hashable],
        league_id: Hashable,
        name: str,
        draft_type: str = DEFAULT_DRAFT_TYPE,
        team_size: int = DEFAULT_TEAM_SIZE,
    ):
        if not participant_ids:
            raise ValueError("participant_ids cannot be empty")
        if len(set(participant_ids)) != len(participant_ids):
            raise ValueError("participant_ids must be unique")
        if draft_type not in DRAFT_TYPES:
            raise ValueError(
                f"Invalid draft type '{draft_type}'. "
                f"Must be one of: {sorted(DRAFT_TYPES)}"
            )
        if team_size < 1:
            raise ValueError(f"team_size must be at least 1 (got {team_size})")

        self.league_id = league_id
        self.name = name
        self.draft_type = draft_type
        self.team_size = team_size
        self.participants = [Participant(pid) for pid in participant_ids]
        self.current_seat = 0
        self.total_picks = 0
        self.final_pick = len(self.participants) * team_size - 1
        self.picks: List[Pick] = []
        self.is_complete = False
        self._active = False

    # ------------------------------------------------------------------
    # Draft state
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._active

    def activate(self):
        """Open the draft. Waivers and trades are disabled while active.

        Raises:
            DraftCompleteError: If every pick has already been made.
        """
        if self.is_complete:
            logger.warning(
                "Activation rejected, league '%s' draft is complete", self.name
            )
            raise DraftCompleteError(f"League '{self.name}' draft is complete")
        self._active = True
        logger.info("League '%s' activated", self.name)

    def deactivate(self):
        """Close the draft. Picks are rejected until it is activated again."""
        self._active = False
        logger.info("League '%s' deactivated", self.name)

    @property
    def current_round(self) -> int:
        """1-based round of the pick currently on the clock."""
        return self.total_picks // len(self.participants) + 1

    def advance(self) -> Optional[Participant]:
        """Move the draft one seat forward.

        Returns the participant now on the clock, or None if the draft is
        complete, in which case the league is also deactivated.

        ``lock()`` calls this for the normal flow of the draft. Calling it
        directly skips whoever is on the clock; that participant ends the
        draft one pick short unless an admin fills the gap with
        ``add_to_player_picks()``.
        """
        if self.total_picks == self.final_pick:
            self.is_complete = True
            self.deactivate()
            logger.info(
                "League '%s' draft complete after %d picks",
                self.name,
                self.total_picks + 1,
            )
            return None

        seat = next_seat(self.draft_type, self.total_picks, len(self.participants))
        self.current_seat = seat
        self.total_picks += 1

        participant = self.participants[seat]
        logger.debug(
            "League '%s': pick %d, seat %d (%s) on the clock",
            self.name,
            self.total_picks + 1,
            seat,
            participant.participant_id,
        )
        return participant

    # ------------------------------------------------------------------
    # Picks
    # ------------------------------------------------------------------

    def lock(self, pick: DraftItem) -> List[LockedPick]:
        """Lock in *pick* for whoever is on the clock, then resolve queues.

        After each pick the draft advances; if the next participant has an
        item queued, it is locked in for them straight away, and so on until
        the draft ends or someone with an empty queue is on the clock. A
        locked item is removed from every participant's queue.

        Returns:
            ``(participant_id, item_name)`` for every pick made by this call,
            in draft order. The first entry is always *pick*.

        Raises:
            LeagueInactiveError: If the league is not active.
            ItemInUseError: If *pick* has already been picked.
        """
        if not self._active:
            logger.warning("Pick rejected, league '%s' is inactive", self.name)
            raise LeagueInactiveError(f"League '{self.name}' is not active")
        if self._is_picked(pick.name):
            logger.warning("Pick rejected, %s has already been picked", pick.name)
            raise ItemInUseError(f"{pick.name} has already been picked")

        locked: List[LockedPick] = []
        queued = False
        while pick is not None:
            for participant in self.participants:
                participant.delete_from_queue(pick.name)

            current = self.participants[self.current_seat]
            current.lock_in(pick)
            locked.append((current.participant_id, pick.name))
            self._record_pick(current, pick, queued)

            next_participant = self.advance()
            if next_participant is None:
                break
            pick = next_participant.first_in_queue()
            queued = True

        return locked

    def _record_pick(self, participant: Participant, pick: DraftItem, queued: bool):
        record = Pick.create(
            pick_number=self.total_picks + 1,
            round=self.current_round,
            seat=self.current_seat,
            participant_id=participant.participant_id,
            item_name=pick.name,
            queued=queued,
        )
        self.picks.append(record)
        logger.info(
            "League '%s' pick %d (Rd %d): %s selects %s%s",
            self.name,
            record.pick_number,
            record.round,
            participant.participant_id,
            pick.name,
            " (queued)" if queued else "",
        )

    # ------------------------------------------------------------------
    # Post-draft roster moves
    # ------------------------------------------------------------------

    def waiver(
        self,
        participant_id: Hashable,
        waivered_from: str,
        waivered_for: DraftItem,
    ) -> List[DraftItem]:
        """Exchange one of a participant's picks for an item still in the pool.

        Returns:
            The participant's updated picks.

        Raises:
            LeagueActiveError: If the draft is still active.
            ItemInUseError: If *waivered_for* has been picked by anyone; it
                has to be traded for instead.
            ParticipantNotFoundError: If the participant is not in the league.
            ItemNotFoundError: If *waivered_from* is not one of their picks.
        """
        self._require_inactive("waiver")
        if self._is_picked(waivered_for.name):
            raise ItemInUseError(f"{waivered_for.name} has already been picked")
        participant = self._get_participant(participant_id)
        if not participant.has_pick(waivered_from):
            raise ItemNotFoundError(
                f"{participant_id} has not picked {waivered_from}"
            )

        participant.delete_from_picks(waivered_from)
        self._take_from_pool(participant, waivered_for)
        logger.info(
            "League '%s' waiver: %s drops %s for %s",
            self.name,
            participant_id,
            waivered_from,
            waivered_for.name,
        )
        return list(participant.picks)

    def trade(
        self,
        user1: Hashable,
        item1: str,
        user2: Hashable,
        item2: str,
    ) -> Tuple[List[DraftItem], List[DraftItem]]:
        """Trade *item1* from *user1* to *user2* for *item2*.

        Both sides are checked before either roster changes, so a failed
        trade leaves the league untouched.

        Returns:
            (user1's picks, user2's picks) after the trade.

        Raises:
            InvalidTradeError: If both sides are the same participant.
            LeagueActiveError: If the draft is still active.
            ParticipantNotFoundError: If either user is not in the league.
            ItemNotFoundError: If either user does not hold their item.
        """
        self._require_inactive("trade")
        participant1 = self._get_participant(user1)
        participant2 = self._get_participant(user2)
        if participant1 is participant2:
            raise InvalidTradeError(f"{user1} cannot trade with themselves")
        if not participant1.has_pick(item1):
            raise ItemNotFoundError(f"{user1} has not picked {item1}")
        if not participant2.has_pick(item2):
            raise ItemNotFoundError(f"{user2} has not picked {item2}")

        traded1 = participant1.delete_from_picks(item1)
        traded2 = participant2.delete_from_picks(item2)
        participant1.lock_in(traded2)
        participant2.lock_in(traded1)
        logger.info(
            "League '%s' trade: %s sends %s to %s for %s",
            self.name,
            user1,
            item1,
            user2,
            item2,
        )
        return list(participant1.picks), list(participant2.picks)

    # ------------------------------------------------------------------
    # Queues
    # ------------------------------------------------------------------

    def add_to_player_queue(
        self, participant_id: Hashable, item: DraftItem
    ) -> List[DraftItem]:
        """Queue *item* for a participant and return their queue.

        Raises:
            ParticipantNotFoundError: If the participant is not in the league.
            ItemInUseError: If the item has already been picked.
        """
        participant = self._get_participant(participant_id)
        if self._is_picked(item.name):
            raise ItemInUseError(f"{item.name} has already been picked")
        participant.add_to_queue(item)
        return list(participant.queue)

    def delete_from_player_queue(
        self, participant_id: Hashable, name: str
    ) -> DraftItem:
        """Remove a named item from a participant's queue and return it."""
        participant = self._get_participant(participant_id)
        item = participant.delete_from_queue(name)
        if item is None:
            raise ItemNotFoundError(f"{name} is not in {participant_id}'s queue")
        return item

    def clear_player_queue(self, participant_id: Hashable) -> List[DraftItem]:
        """Empty a participant's queue, returning everything removed."""
        participant = self._get_participant(participant_id)
        if not participant.queue:
            raise QueueEmptyError(f"{participant_id}'s queue is empty")
        return participant.clear_queue()

    def player_queue(self, participant_id: Hashable) -> List[DraftItem]:
        participant = self._get_participant(participant_id)
        if not participant.queue:
            raise QueueEmptyError(f"{participant_id}'s queue is empty")
        return list(participant.queue)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def player_picks(self, participant_id: Hashable) -> List[DraftItem]:
        participant = self._get_participant(participant_id)
        if not participant.picks:
            raise PicksEmptyError(f"{participant_id} has not made any picks")
        return list(participant.picks)

    def all_picks(self) -> List[DraftItem]:
        """Every item locked in by anyone in the league."""
        picks = [item for p in self.participants for item in p.picks]
        if not picks:
            raise NoPicksError(f"No picks have been made in league '{self.name}'")
        return picks

    def current_player(self) -> Participant:
        """The participant whose turn it is to pick."""
        if not self._active:
            raise LeagueInactiveError(f"League '{self.name}' is not active")
        return self.participants[self.current_seat]

    def add_to_player_picks(
        self, participant_id: Hashable, pick: DraftItem
    ) -> List[DraftItem]:
        """Add an item directly to a participant's picks, outside turn order.

        Prefer ``lock()``. This exists for admins filling in picks for
        participants who were skipped (see ``advance()``).

        Raises:
            ItemInUseError: If the item has already been picked.
            ParticipantNotFoundError: If the participant is not in the league.
        """
        if self._is_picked(pick.name):
            raise ItemInUseError(f"{pick.name} has already been picked")
        participant = self._get_participant(participant_id)
        self._take_from_pool(participant, pick)
        logger.info(
            "League '%s': %s assigned to %s by admin",
            self.name,
            pick.name,
            participant_id,
        )
        return list(participant.picks)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_participant(self, participant_id: Hashable) -> Participant:
        for participant in self.participants:
            if participant.participant_id == participant_id:
                return participant
        raise ParticipantNotFoundError(
            f"{participant_id} is not in league '{self.name}'"
        )

    def _is_picked(self, name: str) -> bool:
        return any(p.has_pick(name) for p in self.participants)

    def _take_from_pool(self, participant: Participant, item: DraftItem):
        """Lock in an item taken outside the draft and drop it from all queues."""
        for other in self.participants:
            other.delete_from_queue(item.name)
        participant.lock_in(item)

    def _require_inactive(self, operation: str):
        if self._active:
            logger.warning(
                "%s rejected, league '%s' is still drafting", operation, self.name
            )
            raise LeagueActiveError(
                f"Cannot {operation} while league '{self.name}' is active"
            )
