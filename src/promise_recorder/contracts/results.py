"""Outcomes of previously scheduled promises.

A callback running on the host can read the results of the promises it
was attached to. The tracker exposes a fixed, pre-supplied feed of these
outcomes; scheduling never adds to it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PromiseResultNotReady:
    """The promise has not completed yet."""


@dataclass(frozen=True, slots=True)
class PromiseResultSuccessful:
    """The promise completed and returned value."""

    value: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise ValueError(f"value must be bytes, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class PromiseResultFailed:
    """The promise completed with a failure."""


PromiseResult = PromiseResultNotReady | PromiseResultSuccessful | PromiseResultFailed
