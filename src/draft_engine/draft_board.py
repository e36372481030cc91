"""Tabular views of a league's draft for reporting.

- ``pick_log_frame``: one row per pick, in draft order
- ``build_draft_board``: rounds x seats grid of item names
- ``picks_per_participant``: current roster sizes
"""

import logging
from dataclasses import asdict

import pandas as pd

from src.draft_engine.league import League

logger = logging.getLogger(__name__)

PICK_LOG_COLUMNS = [
    "pick_number",
    "round",
    "seat",
    "participant_id",
    "item_name",
    "queued",
    "timestamp",
]


def pick_log_frame(league: League) -> pd.DataFrame:
    """Every pick made through the draft, ordered by pick number.

    Items assigned by an admin or swapped in by waivers and trades are not
    draft picks and do not appear here.
    """
    rows = [asdict(pick) for pick in league.picks]
    df = pd.DataFrame(rows, columns=PICK_LOG_COLUMNS)
    return df.sort_values("pick_number").reset_index(drop=True)


def build_draft_board(league: League) -> pd.DataFrame:
    """Grid of picked item names, one row per round and one column per seat.

    Columns are participant ids in seat order. Picks not made yet (or
    skipped) are empty strings.
    """
    participant_ids = [p.participant_id for p in league.participants]
    rounds = pd.RangeIndex(1, league.team_size + 1, name="round")

    log = pick_log_frame(league)
    if log.empty:
        board = pd.DataFrame("", index=rounds, columns=participant_ids)
    else:
        board = (
            log.pivot(index="round", columns="participant_id", values="item_name")
            .reindex(index=rounds, columns=participant_ids)
            .fillna("")
        )
    board.columns.name = None

    logger.debug(
        "Built draft board for '%s': %d picks over %d rounds",
        league.name,
        len(log),
        league.team_size,
    )
    return board


def picks_per_participant(league: League) -> pd.Series:
    """Number of items each participant currently holds, in seat order."""
    return pd.Series(
        [len(p.picks) for p in league.participants],
        index=[p.participant_id for p in league.participants],
        name="picks",
        dtype="int64",
    )
