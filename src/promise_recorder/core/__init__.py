"""Core promise recorder: tracker, configuration, logging and canonical form."""

from promise_recorder.core.canonical import canonical_json, promise_fingerprint, stable_hash
from promise_recorder.core.formatting import render_promise_tree
from promise_recorder.core.logging import configure_from_settings, configure_logging
from promise_recorder.core.tracker import PromiseTracker

__all__ = [
    "PromiseTracker",
    "canonical_json",
    "configure_from_settings",
    "configure_logging",
    "promise_fingerprint",
    "render_promise_tree",
    "stable_hash",
]
