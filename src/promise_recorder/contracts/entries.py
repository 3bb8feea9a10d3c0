"""Flat per-handle records kept by the tracker.

Each scheduling call stores exactly one entry under its freshly allocated
handle. Entries are folded into PromiseTree values on reconstruction.

Invariant: a CallbackEntry only names its base; the base is looked up
(and consumed) when the callback itself is reconstructed.
"""

from dataclasses import dataclass

from promise_recorder.contracts.payloads import PromiseBatchAction, PromiseCreateArgs
from promise_recorder.contracts.tree import PromiseTree
from promise_recorder.contracts.types import PromiseId


@dataclass(frozen=True, slots=True)
class CreateEntry:
    """A single call."""

    args: PromiseCreateArgs


@dataclass(frozen=True, slots=True)
class CallbackEntry:
    """A call to run after base completes. base is resolved lazily."""

    base: PromiseId
    callback: PromiseCreateArgs


@dataclass(frozen=True, slots=True)
class BatchEntry:
    """A batch of account actions."""

    action: PromiseBatchAction


@dataclass(frozen=True, slots=True)
class ComposedEntry:
    """An already-resolved tree (And combinations, batch callbacks)."""

    tree: PromiseTree


ScheduledEntry = CreateEntry | CallbackEntry | BatchEntry | ComposedEntry
