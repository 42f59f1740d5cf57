"""In-session history of configuration snapshots."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from datetime import datetime

from cabinetry.domain import CabinetConfiguration, utcnow

from .comparison import clone_configuration, compare_configurations

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20


class ConfigurationHistory:
    """A bounded, newest-last list of immutable configuration snapshots.

    Restoring a snapshot never hands the stored instance back; it returns a
    fresh copy to become the new current configuration.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._snapshots: deque[CabinetConfiguration] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[CabinetConfiguration]:
        return iter(self._snapshots)

    def record(self, config: CabinetConfiguration) -> bool:
        """Append a snapshot unless it matches the latest one.

        Returns:
            True if a snapshot was added.
        """
        if self._snapshots and compare_configurations(
            self._snapshots[-1], config
        ).identical:
            return False
        self._snapshots.append(config)
        return True

    def latest(self) -> CabinetConfiguration | None:
        return self._snapshots[-1] if self._snapshots else None

    def changes(self, index: int) -> list[str]:
        """Differences between snapshot ``index - 1`` and ``index``."""
        if index <= 0:
            return []
        return compare_configurations(
            self._snapshots[index - 1], self._snapshots[index]
        ).differences

    def restore(
        self, index: int, now: Callable[[], datetime] = utcnow
    ) -> CabinetConfiguration:
        """Return a copy of snapshot ``index`` as a new current configuration.

        Raises:
            IndexError: If no snapshot exists at ``index``.
        """
        snapshot = self._snapshots[index]
        timestamp = now()
        logger.debug(f"Restoring configuration snapshot {index}")
        return clone_configuration(
            snapshot, {"created_at": timestamp, "updated_at": timestamp}
        )
