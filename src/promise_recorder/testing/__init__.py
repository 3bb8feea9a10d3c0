# src/promise_recorder/testing/__init__.py
"""Test infrastructure for code that schedules promises.

Factories for constructing payloads and trackers with sensible defaults.
When a payload's constructor changes, update the factory here.
Tests that use factories need ZERO changes.

Usage:
    from promise_recorder.testing import make_call, make_batch, make_tracker
    from promise_recorder.testing import make_success, make_failure
    from promise_recorder.testing import make_tracker_from_config
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from promise_recorder.contracts import (
    AccountId,
    FunctionCall,
    PromiseAction,
    PromiseBatchAction,
    PromiseCreateArgs,
    PromiseResult,
    PromiseResultFailed,
    PromiseResultNotReady,
    PromiseResultSuccessful,
    Transfer,
)
from promise_recorder.core.config import load_settings
from promise_recorder.core.logging import configure_from_settings
from promise_recorder.core.tracker import PromiseTracker

# 5 Tgas, a typical budget for a cross-contract call
DEFAULT_GAS = 5_000_000_000_000


# =============================================================================
# Payloads
# =============================================================================


def make_call(
    method: str = "ft_transfer",
    *,
    target: str = "token.near",
    args: bytes = b"{}",
    deposit: int = 0,
    gas: int = DEFAULT_GAS,
) -> PromiseCreateArgs:
    """Build a PromiseCreateArgs.

    Usage:
        call = make_call()                                  # token.near.ft_transfer
        call = make_call("ft_balance_of", args=b'{"account_id":"a.near"}')
        call = make_call(target="aurora", method="submit", deposit=1)
    """
    return PromiseCreateArgs(
        target_account_id=AccountId(target),
        method=method,
        args=args,
        attached_balance=deposit,
        attached_gas=gas,
    )


def make_batch(
    target: str = "alice.near",
    actions: Iterable[PromiseAction] | None = None,
) -> PromiseBatchAction:
    """Build a PromiseBatchAction.

    Defaults to a single 1-yocto transfer when no actions are given.

    Usage:
        batch = make_batch()
        batch = make_batch("bob.near", [CreateAccount(), Transfer(10**24)])
    """
    if actions is None:
        actions = (Transfer(amount=1),)
    return PromiseBatchAction(target_account_id=AccountId(target), actions=tuple(actions))


def make_function_call_action(
    name: str = "ft_on_transfer",
    *,
    args: bytes = b"{}",
    deposit: int = 0,
    gas: int = DEFAULT_GAS,
) -> FunctionCall:
    """Build a FunctionCall batch action."""
    return FunctionCall(name=name, args=args, attached_yocto=deposit, gas=gas)


# =============================================================================
# Results
# =============================================================================


def make_success(value: bytes = b"") -> PromiseResultSuccessful:
    return PromiseResultSuccessful(value)


def make_failure() -> PromiseResultFailed:
    return PromiseResultFailed()


def make_not_ready() -> PromiseResultNotReady:
    return PromiseResultNotReady()


# =============================================================================
# Trackers
# =============================================================================


def make_tracker(results: Iterable[PromiseResult] = ()) -> PromiseTracker:
    """Build a PromiseTracker with the given result feed.

    Usage:
        tracker = make_tracker()
        tracker = make_tracker([make_success(b"42"), make_failure()])
    """
    return PromiseTracker(promise_results=results)


def make_tracker_from_config(
    config_path: Path,
    *,
    overrides: dict[str, Any] | None = None,
) -> PromiseTracker:
    """Build a PromiseTracker from a YAML settings file.

    Applies the file's logging section before the tracker is created, so
    the tracker's events honour the configured level and format.

    Usage:
        tracker = make_tracker_from_config(Path("tests/fixtures/tracker.yaml"))
        tracker = make_tracker_from_config(path, overrides={"logging": {"level": "DEBUG"}})
    """
    settings = load_settings(config_path, overrides=overrides)
    configure_from_settings(settings.logging)
    return PromiseTracker.from_settings(settings)


__all__ = [
    "DEFAULT_GAS",
    "make_batch",
    "make_call",
    "make_failure",
    "make_function_call_action",
    "make_not_ready",
    "make_success",
    "make_tracker",
    "make_tracker_from_config",
]
