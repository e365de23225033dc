"""The canonical Round, its cursor, and save-on-change persistence."""

import asyncio
import logging
from typing import Any, Optional, Set

from models import HoleRecord, Round, RoundSummary
from analytics.stats import summarize
from storage.base import KeyValueStore
from storage.codec import round_from_blob, round_to_blob
from storage.confirmation import NEW_ROUND_MESSAGE, NEW_ROUND_TITLE, ConfirmationService
from storage.exceptions import InvalidBlobError, InvalidUpdateError, StorageError

logger = logging.getLogger(__name__)

STORAGE_KEY = "@golf_round_data"


class RoundStore:
    """
    Owns the current Round and mediates every read and write of it.

    Each successful mutation swaps in a new Round value (the previous one
    is never touched) and schedules one write of the whole round. Writes
    are not awaited, batched or retried; `flush()` waits for any still in
    flight.
    """

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY):
        self._kv = kv
        self._key = key
        self._round = Round.new()
        self._pending: Set[asyncio.Task] = set()

    @property
    def round(self) -> Round:
        return self._round

    @property
    def current_hole(self) -> int:
        return self._round.current_hole

    @property
    def current_hole_data(self) -> HoleRecord:
        return self._round.current_hole_data

    def summary(self) -> RoundSummary:
        return summarize(self._round)

    # ================================================================
    # Persistence
    # ================================================================

    async def load(self) -> Round:
        """Read the saved round; any failure starts over with a fresh one."""
        try:
            blob = await self._kv.get(self._key)
            if blob is None:
                logger.info("No saved round under %s, starting a new one", self._key)
                self._round = Round.new()
            else:
                self._round = round_from_blob(blob)
                logger.info(
                    "Loaded round: %d holes played, on hole %d",
                    len(self._round.played_holes()), self._round.current_hole,
                )
        except (StorageError, InvalidBlobError) as exc:
            logger.warning("Could not load saved round, starting a new one: %s", exc)
            self._round = Round.new()
        return self._round

    async def save(self, round_: Optional[Round] = None) -> bool:
        """Write a round (default: the current one). Failures are logged, not raised."""
        round_ = round_ if round_ is not None else self._round
        try:
            await self._kv.set(self._key, round_to_blob(round_))
        except StorageError as exc:
            logger.warning("Could not save round: %s", exc)
            return False
        logger.debug("Saved round under %s (hole %d)", self._key, round_.current_hole)
        return True

    async def flush(self) -> None:
        """Wait for every write scheduled so far."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _commit(self, new_round: Round) -> Round:
        self._round = new_round
        task = asyncio.get_running_loop().create_task(self.save(new_round))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return new_round

    # ================================================================
    # Mutations
    # ================================================================

    async def update_hole(self, hole_number: int, field_name: str, value: Any) -> Round:
        """Replace one field on one hole. Raises InvalidUpdateError if rejected."""
        try:
            updated = self._round.with_hole_update(hole_number, field_name, value)
        except ValueError as exc:
            raise InvalidUpdateError(str(exc)) from exc
        return self._commit(updated)

    async def set_current_hole(self, number: int) -> Round:
        try:
            updated = self._round.with_current_hole(number)
        except ValueError as exc:
            raise InvalidUpdateError(str(exc)) from exc
        return self._commit(updated)

    async def next_hole(self) -> Round:
        """Move forward one hole; stays put on the last hole."""
        if self._round.get_hole(self.current_hole + 1) is None:
            return self._round
        return await self.set_current_hole(self.current_hole + 1)

    async def previous_hole(self) -> Round:
        """Move back one hole; stays put on the first hole."""
        if self._round.get_hole(self.current_hole - 1) is None:
            return self._round
        return await self.set_current_hole(self.current_hole - 1)

    async def reset(self, confirmation: ConfirmationService) -> bool:
        """Replace the round with a fresh one once the player confirms. No undo."""
        if not await confirmation.confirm(NEW_ROUND_TITLE, NEW_ROUND_MESSAGE):
            logger.info("New round cancelled")
            return False
        self._commit(Round.new())
        logger.info("Started a new round")
        return True
