# src/promise_recorder/contracts/handler.py
"""The promise scheduling surface a contract runtime offers.

Contract logic under test is written against PromiseHandler, not against a
concrete host. PromiseTracker implements it by recording requests instead
of dispatching them.

Protocol Pattern:
    - Logic under test accepts a PromiseHandler
    - Production wires in the real host bindings
    - Tests wire in a PromiseTracker and assert on the recorded trees
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from promise_recorder.contracts.payloads import PromiseBatchAction, PromiseCreateArgs
    from promise_recorder.contracts.results import PromiseResult
    from promise_recorder.contracts.types import PromiseId


@runtime_checkable
class PromiseHandler(Protocol):
    """What contract logic expects from the promise scheduler.

    Every scheduling method returns a fresh handle. Results of promises
    completed before the current call are available read-only through
    promise_results_count() and promise_result().
    """

    def promise_results_count(self) -> int:
        """Number of results available to the current call."""
        ...

    def promise_result(self, index: int) -> PromiseResult | None:
        """Result at index, or None if index is out of range."""
        ...

    def promise_create_call(self, args: PromiseCreateArgs) -> PromiseId:
        """Schedule a single function call."""
        ...

    def promise_create_and_combine(self, args: Sequence[PromiseCreateArgs]) -> PromiseId:
        """Schedule several calls combined to run in parallel."""
        ...

    def promise_attach_callback(self, base: PromiseId, callback: PromiseCreateArgs) -> PromiseId:
        """Schedule callback to run after base completes."""
        ...

    def promise_create_batch(self, args: PromiseBatchAction) -> PromiseId:
        """Schedule a batch of account actions."""
        ...

    def promise_attach_batch_callback(self, base: PromiseId, args: PromiseBatchAction) -> PromiseId:
        """Schedule a batch of account actions to run after base completes."""
        ...

    def promise_return(self, promise: PromiseId) -> None:
        """Make promise the return value of the current call."""
        ...

    def read_only(self) -> Self:
        """Handler for a nested read-only evaluation."""
        ...
