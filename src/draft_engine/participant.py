"""Per-participant draft state: locked-in picks and a queue of fallbacks."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Hashable, List, Optional

from src.draft_engine.draft_item import DraftItem


@dataclass
class Participant:
    """One seat at the draft table.

    Participants are created by their League and should only be mutated
    through it; the League is responsible for checking the shared pool
    before anything is locked in here.
    """

    participant_id: Hashable
    picks: List[DraftItem] = field(default_factory=list)
    queue: Deque[DraftItem] = field(default_factory=deque)

    def add_to_queue(self, item: DraftItem):
        """Queue an item to be picked automatically on this participant's turn."""
        self.queue.append(item)

    def first_in_queue(self) -> Optional[DraftItem]:
        """Pop the front of the queue, or None if the queue is empty."""
        if not self.queue:
            return None
        return self.queue.popleft()

    def delete_from_queue(self, name: str) -> Optional[DraftItem]:
        """Remove and return the queued item called *name*, if present."""
        for idx, item in enumerate(self.queue):
            if item.name == name:
                del self.queue[idx]
                return item
        return None

    def clear_queue(self) -> List[DraftItem]:
        """Empty the queue and return everything that was in it."""
        cleared = list(self.queue)
        self.queue.clear()
        return cleared

    def lock_in(self, item: DraftItem):
        self.picks.append(item)

    def delete_from_picks(self, name: str) -> Optional[DraftItem]:
        """Remove and return the picked item called *name*, if present."""
        for idx, item in enumerate(self.picks):
            if item.name == name:
                return self.picks.pop(idx)
        return None

    def has_pick(self, name: str) -> bool:
        return any(item.name == name for item in self.picks)
