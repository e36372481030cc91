from src.draft_engine.draft_item import DraftItem, NamedItem
from src.draft_engine.draft_registry import DraftRegistry
from src.draft_engine.draft_types import (
    DRAFT_TYPES,
    linear_draft,
    next_seat,
    pick_order,
    snake_draft,
)
from src.draft_engine.errors import (
    DraftCompleteError,
    ItemInUseError,
    ItemNotFoundError,
    InvalidTradeError,
    LeagueActiveError,
    LeagueError,
    LeagueInactiveError,
    LeagueNameInUseError,
    LeagueNotFoundError,
    NoPicksError,
    ParticipantNotFoundError,
    PicksEmptyError,
    QueueEmptyError,
    RegistryError,
)
from src.draft_engine.league import League, Pick
from src.draft_engine.participant import Participant

__all__ = [
    "DRAFT_TYPES",
    "DraftItem",
    "DraftRegistry",
    "DraftCompleteError",
    "ItemInUseError",
    "ItemNotFoundError",
    "InvalidTradeError",
    "League",
    "LeagueActiveError",
    "LeagueError",
    "LeagueInactiveError",
    "LeagueNameInUseError",
    "LeagueNotFoundError",
    "NamedItem",
    "NoPicksError",
    "Participant",
    "ParticipantNotFoundError",
    "Pick",
    "PicksEmptyError",
    "QueueEmptyError",
    "RegistryError",
    "linear_draft",
    "next_seat",
    "pick_order",
    "snake_draft",
]
