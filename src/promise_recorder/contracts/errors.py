# src/promise_recorder/contracts/errors.py
"""Promise recorder exceptions.

Only caller-contract violations raise. Reading a result index past the end
of the result feed is an expected condition and returns None instead.
"""

from promise_recorder.contracts.types import PromiseId


class PromiseRecorderError(Exception):
    """Base class for promise recorder errors."""


class UnknownPromiseError(PromiseRecorderError):
    """Raised when reconstruction references a handle that is not stored.

    The handle was either never allocated, or was already consumed by an
    earlier reconstruction (e.g., attached as the base of a batch callback).

    Attributes:
        promise_id: The handle that could not be resolved
        requested_id: The handle whose reconstruction was requested
    """

    def __init__(
        self,
        promise_id: PromiseId,
        *,
        requested_id: PromiseId | None = None,
        message: str | None = None,
    ) -> None:
        self.promise_id = promise_id
        self.requested_id = requested_id if requested_id is not None else promise_id
        if message is None:
            message = f"Unknown promise id {promise_id}"
            if self.requested_id != promise_id:
                message += f" (while resolving promise {self.requested_id})"
        super().__init__(message)


class PromiseCycleError(UnknownPromiseError):
    """Raised when a callback names its own handle as its base."""

    def __init__(self, promise_id: PromiseId, *, requested_id: PromiseId | None = None) -> None:
        super().__init__(
            promise_id,
            requested_id=requested_id,
            message=f"Promise {promise_id} is its own callback base",
        )


class PromiseIdExhaustedError(PromiseRecorderError):
    """Raised when the handle counter would leave the u64 range."""

    def __init__(self, next_id: int) -> None:
        self.next_id = next_id
        super().__init__(f"Promise id {next_id} exceeds the u64 handle range")
