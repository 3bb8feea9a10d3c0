"""
promise-recorder: a test double for cross-contract promise scheduling.

Records the promises contract logic asks its host to schedule, without
executing them, and rebuilds the nested promise trees so tests can assert
on what would have been scheduled.
"""

from promise_recorder.contracts import (
    AndPromise,
    BatchPromise,
    CreatePromise,
    PromiseBatchAction,
    PromiseCreateArgs,
    PromiseHandler,
    PromiseId,
    PromiseTree,
    ThenPromise,
    UnknownPromiseError,
)
from promise_recorder.core.tracker import PromiseTracker

__version__ = "0.1.0"

__all__ = [
    "AndPromise",
    "BatchPromise",
    "CreatePromise",
    "PromiseBatchAction",
    "PromiseCreateArgs",
    "PromiseHandler",
    "PromiseId",
    "PromiseTracker",
    "PromiseTree",
    "ThenPromise",
    "UnknownPromiseError",
    "__version__",
]
