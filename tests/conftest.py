# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from promise_recorder.contracts import PromiseBatchAction, PromiseCreateArgs
from promise_recorder.core.tracker import PromiseTracker
from promise_recorder.testing import make_batch, make_call, make_failure, make_success, make_tracker

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test applied."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    structlog.reset_defaults()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def tracker() -> PromiseTracker:
    """Empty tracker with an empty result feed."""
    return make_tracker()


@pytest.fixture
def tracker_with_results() -> PromiseTracker:
    """Tracker whose feed holds three results: success, failure, success."""
    return make_tracker([make_success(b"first"), make_failure(), make_success(b"third")])


@pytest.fixture
def call() -> PromiseCreateArgs:
    return make_call("ft_transfer", args=b'{"receiver_id":"bob.near","amount":"100"}')


@pytest.fixture
def other_call() -> PromiseCreateArgs:
    return make_call("ft_balance_of", args=b'{"account_id":"bob.near"}', gas=0)


@pytest.fixture
def batch() -> PromiseBatchAction:
    return make_batch("alice.near")
