"""Shared contracts for promise scheduling data types.

This package is a LEAF MODULE with no outbound dependencies to core.
Settings classes are NOT re-exported here - import them from
promise_recorder.core.config.

Import patterns:
    from promise_recorder.contracts import PromiseCreateArgs, ThenPromise, PromiseId
    from promise_recorder.core.config import TrackerSettings
"""

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
    PromiseRecorderError,
    UnknownPromiseError,
)
from promise_recorder.contracts.handler import PromiseHandler
from promise_recorder.contracts.payloads import (
    AddFullAccessKey,
    AddFunctionCallKey,
    CreateAccount,
    DeleteAccount,
    DeleteKey,
    DeployContract,
    FunctionCall,
    PromiseAction,
    PromiseBatchAction,
    PromiseCreateArgs,
    Stake,
    Transfer,
)
from promise_recorder.contracts.results import (
    PromiseResult,
    PromiseResultFailed,
    PromiseResultNotReady,
    PromiseResultSuccessful,
)
from promise_recorder.contracts.tree import (
    AndPromise,
    BatchPromise,
    CreatePromise,
    PromiseTree,
    SimplePromise,
    ThenPromise,
    promise_to_dict,
)
from promise_recorder.contracts.types import U64_MAX, U128_MAX, AccountId, PromiseId

__all__ = [
    "U64_MAX",
    "U128_MAX",
    "AccountId",
    "AddFullAccessKey",
    "AddFunctionCallKey",
    "AndPromise",
    "BatchEntry",
    "BatchPromise",
    "CallbackEntry",
    "ComposedEntry",
    "CreateAccount",
    "CreateEntry",
    "CreatePromise",
    "DeleteAccount",
    "DeleteKey",
    "DeployContract",
    "FunctionCall",
    "PromiseAction",
    "PromiseBatchAction",
    "PromiseCreateArgs",
    "PromiseCycleError",
    "PromiseHandler",
    "PromiseIdExhaustedError",
    "PromiseRecorderError",
    "PromiseResult",
    "PromiseResultFailed",
    "PromiseResultNotReady",
    "PromiseResultSuccessful",
    "PromiseTree",
    "ScheduledEntry",
    "SimplePromise",
    "Stake",
    "ThenPromise",
    "Transfer",
    "UnknownPromiseError",
    "promise_to_dict",
]
