"""Thread-safe holder for the shared market snapshot."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from sector_analyzer.data._types import MarketSnapshot

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[], MarketSnapshot]


class SnapshotStore:
    """
    Owns the current MarketSnapshot and its refresh protocol.

    Readers receive the snapshot by reference and must treat it as
    read-only.  Loading and replacement happen under a single lock;
    a failed load leaves the previous snapshot in place.
    """

    def __init__(self, loader: SnapshotLoader):
        """
        Initialize the store.

        Args:
            loader: Zero-argument callable that acquires a fresh snapshot
        """
        self._loader = loader
        self._snapshot: MarketSnapshot | None = None
        self._lock = threading.Lock()

    def get(self) -> MarketSnapshot:
        """
        Return the current snapshot, loading it on first use.

        Returns:
            The shared snapshot
        """
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            # Another thread may have loaded while we waited
            if self._snapshot is None:
                self._snapshot = self._load()
            return self._snapshot

    def refresh(self) -> MarketSnapshot:
        """
        Reload the snapshot unconditionally.

        Returns:
            The newly loaded snapshot
        """
        with self._lock:
            self._snapshot = self._load()
            return self._snapshot

    def replace(self, snapshot: MarketSnapshot) -> None:
        """
        Swap in a snapshot built elsewhere.

        Args:
            snapshot: Snapshot that becomes current
        """
        with self._lock:
            self._snapshot = snapshot
        logger.info("Market snapshot replaced")

    def clear(self) -> None:
        """Drop the current snapshot; the next get() reloads."""
        with self._lock:
            self._snapshot = None

    @property
    def current(self) -> MarketSnapshot | None:
        """Current snapshot without triggering a load."""
        return self._snapshot

    def _load(self) -> MarketSnapshot:
        snapshot = self._loader()
        logger.info(
            "Loaded market snapshot: %d price series, %d macro series, "
            "%d employment series, %d R&D values",
            len(snapshot.sector_prices),
            len(snapshot.macro_data),
            len(snapshot.employment_data),
            len(snapshot.rd_data),
        )
        return snapshot
