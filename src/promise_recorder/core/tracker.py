# src/promise_recorder/core/tracker.py
"""In-memory promise tracker.

PromiseTracker implements PromiseHandler but schedules nothing. Each request
is stored under a fresh handle, and the nested promise tree rooted at any
handle can be rebuilt later so tests can assert on what would have been
scheduled.

Reconstruction is destructive: rebuilding a handle removes its entry (and,
for callbacks, the entries of its whole base chain). A promise attached as
a dependency cannot be observed independently afterwards, only through the
tree of the promise it was folded into.

Usage:
    tracker = PromiseTracker(promise_results=(PromiseResultSuccessful(b"ok"),))
    base = tracker.promise_create_call(args)
    then = tracker.promise_attach_batch_callback(base, batch)
    tree = tracker.take_promise(then)
    # ThenPromise(base=CreatePromise(args), callback=BatchPromise(batch))
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

import structlog

from promise_recorder.contracts.entries import (
    BatchEntry,
    CallbackEntry,
    ComposedEntry,
    CreateEntry,
    ScheduledEntry,
)
from promise_recorder.contracts.errors import (
    PromiseCycleError,
    PromiseIdExhaustedError,
    UnknownPromiseError,
)
from promise_recorder.contracts.payloads import PromiseBatchAction, PromiseCreateArgs
from promise_recorder.contracts.results import PromiseResult
from promise_recorder.contracts.tree import (
    AndPromise,
    BatchPromise,
    CreatePromise,
    PromiseTree,
    ThenPromise,
)
from promise_recorder.contracts.types import U64_MAX, PromiseId

if TYPE_CHECKING:
    from promise_recorder.core.config import TrackerSettings

logger = structlog.get_logger(__name__)


class PromiseTracker:
    """Records promise scheduling requests instead of executing them.

    State:
    - next handle (monotonic from 0, never reused)
    - handle -> ScheduledEntry store
    - fixed result feed visible to callbacks
    - return marker (last promise_return wins)

    Every public operation runs under one lock, so the tracker can be shared
    with a multi-threaded host. Operations are not meant to interleave.
    """

    def __init__(self, promise_results: Iterable[PromiseResult] = ()) -> None:
        """Initialize an empty tracker.

        Args:
            promise_results: Results of earlier promises, in host order.
        """
        self._lock = threading.Lock()
        self._next_id = 0
        self._scheduled: dict[PromiseId, ScheduledEntry] = {}
        self._promise_results: tuple[PromiseResult, ...] = tuple(promise_results)
        self._returned_promise: PromiseId | None = None

    @classmethod
    def from_settings(cls, settings: TrackerSettings) -> PromiseTracker:
        """Create a tracker whose result feed comes from settings."""
        return cls(promise_results=settings.to_promise_results())

    # =========================================================================
    # Inspection (non-destructive)
    # =========================================================================

    @property
    def scheduled_promises(self) -> Mapping[PromiseId, ScheduledEntry]:
        """Read-only view of the entries not yet consumed."""
        return MappingProxyType(self._scheduled)

    @property
    def promise_results(self) -> tuple[PromiseResult, ...]:
        return self._promise_results

    @property
    def returned_promise(self) -> PromiseId | None:
        """Handle marked as the call's return value, if any."""
        return self._returned_promise

    @property
    def next_promise_id(self) -> PromiseId:
        """Handle the next scheduling call will receive."""
        return PromiseId(self._next_id)

    def __len__(self) -> int:
        return len(self._scheduled)

    def __contains__(self, promise_id: object) -> bool:
        return promise_id in self._scheduled

    # =========================================================================
    # Result feed
    # =========================================================================

    def promise_results_count(self) -> int:
        return len(self._promise_results)

    def promise_result(self, index: int) -> PromiseResult | None:
        """Return the result at index.

        Callers are expected to probe past the end of the feed, so an
        out-of-range (or negative) index is not an error.

        Returns:
            The stored result, or None if index is out of range
        """
        if index < 0 or index >= len(self._promise_results):
            return None
        return self._promise_results[index]

    # =========================================================================
    # Scheduling
    # =========================================================================

    def promise_create_call(self, args: PromiseCreateArgs) -> PromiseId:
        with self._lock:
            return self._store(CreateEntry(args))

    def promise_create_and_combine(self, args: Sequence[PromiseCreateArgs]) -> PromiseId:
        """Schedule calls combined in parallel.

        The And node's children keep the order of args.
        """
        tree = AndPromise(tuple(CreatePromise(a) for a in args))
        with self._lock:
            return self._store(ComposedEntry(tree))

    def promise_attach_callback(self, base: PromiseId, callback: PromiseCreateArgs) -> PromiseId:
        """Schedule callback to run after base.

        base is only remembered here. It is resolved (and consumed) when
        this callback's own handle is reconstructed, or never.
        """
        with self._lock:
            return self._store(CallbackEntry(base, callback))

    def promise_create_batch(self, args: PromiseBatchAction) -> PromiseId:
        with self._lock:
            return self._store(BatchEntry(args))

    def promise_attach_batch_callback(self, base: PromiseId, args: PromiseBatchAction) -> PromiseId:
        """Schedule a batch to run after base, resolving base immediately.

        Unlike promise_attach_callback, base is reconstructed right away and
        removed from the store; the new entry holds the complete tree.

        Raises:
            UnknownPromiseError: If base was never allocated or was already consumed
        """
        with self._lock:
            base_tree = self._remove_as_tree(base)
            return self._store(ComposedEntry(ThenPromise(base=base_tree, callback=BatchPromise(args))))

    def promise_return(self, promise: PromiseId) -> None:
        """Mark promise as the call's return value. No existence check."""
        with self._lock:
            self._returned_promise = promise
        logger.debug("promise_returned", promise_id=promise)

    def read_only(self) -> PromiseTracker:
        """Tracker for a nested read-only evaluation.

        The view sees the same result feed but starts with handle 0, an
        empty store and no return marker. Scheduling through it never
        touches this tracker.
        """
        return PromiseTracker(promise_results=self._promise_results)

    # =========================================================================
    # Reconstruction
    # =========================================================================

    def take_promise(self, promise_id: PromiseId) -> PromiseTree:
        """Remove promise_id (and its callback base chain) and return its tree.

        One-shot: a second call for the same handle raises.

        Raises:
            UnknownPromiseError: If promise_id or any base in its chain is not stored
            PromiseCycleError: If a callback names itself as its base
        """
        with self._lock:
            return self._remove_as_tree(promise_id)

    def _allocate_id(self) -> PromiseId:
        if self._next_id > U64_MAX:
            raise PromiseIdExhaustedError(self._next_id)
        promise_id = PromiseId(self._next_id)
        self._next_id += 1
        return promise_id

    def _store(self, entry: ScheduledEntry) -> PromiseId:
        promise_id = self._allocate_id()
        self._scheduled[promise_id] = entry
        logger.debug("promise_scheduled", promise_id=promise_id, kind=type(entry).__name__)
        return promise_id

    def _remove_as_tree(self, promise_id: PromiseId) -> PromiseTree:
        """Fold the entry for promise_id into a tree, removing what it consumes.

        Callback chains are walked iteratively: first collect the callbacks
        from the requested handle down to the first non-callback entry, then
        wrap that entry's tree in one ThenPromise per callback.

        On failure every removed entry is put back, leaving the store
        unchanged.
        """
        removed: list[tuple[PromiseId, ScheduledEntry]] = []
        callbacks: list[PromiseCreateArgs] = []
        current = promise_id
        try:
            while True:
                entry = self._scheduled.pop(current, None)
                if entry is None:
                    raise UnknownPromiseError(current, requested_id=promise_id)
                removed.append((current, entry))
                if not isinstance(entry, CallbackEntry):
                    break
                if entry.base == current:
                    raise PromiseCycleError(current, requested_id=promise_id)
                callbacks.append(entry.callback)
                current = entry.base
        except UnknownPromiseError as exc:
            # Handles are stored in ascending order; keep views iterating that way
            restored = sorted([*self._scheduled.items(), *removed])
            self._scheduled.clear()
            self._scheduled.update(restored)
            logger.warning(
                "promise_resolution_failed",
                promise_id=promise_id,
                missing_id=exc.promise_id,
                reason=str(exc),
            )
            raise

        tree = self._leaf_tree(entry)
        for callback in reversed(callbacks):
            tree = ThenPromise(base=tree, callback=CreatePromise(callback))

        for consumed_id, _ in removed:
            logger.debug("promise_consumed", promise_id=consumed_id, requested_id=promise_id)
        return tree

    @staticmethod
    def _leaf_tree(entry: ScheduledEntry) -> PromiseTree:
        """Tree for a non-callback entry."""
        match entry:
            case CreateEntry(args=args):
                return CreatePromise(args)
            case BatchEntry(action=action):
                return BatchPromise(action)
            case ComposedEntry(tree=tree):
                return tree
            case CallbackEntry():
                raise TypeError("Callback entries are folded by _remove_as_tree, not converted directly")
            case _:
                assert_never(entry)
