# src/promise_recorder/contracts/payloads.py
"""Call descriptions and batch actions handed to the scheduler.

These are the payloads a contract passes when it asks the host to schedule
a promise. The tracker copies and stores them but never interprets them:
argument bytes are not decoded and no gas accounting is done.

The only checks performed are the integer widths the host enforces at the
type level (u64 gas and nonces, u128 balances).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from promise_recorder.contracts.types import U64_MAX, U128_MAX, AccountId


def _check_range(name: str, value: int, maximum: int) -> None:
    """Reject integers outside [0, maximum].

    Raises:
        ValueError: If value is negative or above maximum
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise ValueError(f"{name} must be in [0, {maximum}], got {value}")


@dataclass(frozen=True, slots=True)
class PromiseCreateArgs:
    """A single external function call.

    Attributes:
        target_account_id: Account whose contract receives the call
        method: Method name to invoke
        args: Encoded call arguments (never decoded here)
        attached_balance: Deposit sent with the call, in yocto units (u128)
        attached_gas: Gas budget for the call (u64)
    """

    target_account_id: AccountId
    method: str
    args: bytes = b""
    attached_balance: int = 0
    attached_gas: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.args, bytes):
            raise ValueError(f"args must be bytes, got {type(self.args).__name__}")
        _check_range("attached_balance", self.attached_balance, U128_MAX)
        _check_range("attached_gas", self.attached_gas, U64_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_account_id": self.target_account_id,
            "method": self.method,
            "args": self.args,
            "attached_balance": self.attached_balance,
            "attached_gas": self.attached_gas,
        }


# =============================================================================
# Batch actions
# =============================================================================


@dataclass(frozen=True, slots=True)
class CreateAccount:
    """Create the batch's target account."""

    def to_dict(self) -> dict[str, Any]:
        return {"create_account": {}}


@dataclass(frozen=True, slots=True)
class Transfer:
    """Send tokens to the batch's target account."""

    amount: int

    def __post_init__(self) -> None:
        _check_range("amount", self.amount, U128_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {"transfer": {"amount": self.amount}}


@dataclass(frozen=True, slots=True)
class DeployContract:
    """Deploy contract code to the batch's target account."""

    code: bytes

    def to_dict(self) -> dict[str, Any]:
        return {"deploy_contract": {"code": self.code}}


@dataclass(frozen=True, slots=True)
class FunctionCall:
    """Call a method on the batch's target account."""

    name: str
    args: bytes = b""
    attached_yocto: int = 0
    gas: int = 0

    def __post_init__(self) -> None:
        _check_range("attached_yocto", self.attached_yocto, U128_MAX)
        _check_range("gas", self.gas, U64_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {
            "function_call": {
                "name": self.name,
                "args": self.args,
                "attached_yocto": self.attached_yocto,
                "gas": self.gas,
            }
        }


@dataclass(frozen=True, slots=True)
class Stake:
    """Stake tokens with a validator key."""

    amount: int
    public_key: str

    def __post_init__(self) -> None:
        _check_range("amount", self.amount, U128_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {"stake": {"amount": self.amount, "public_key": self.public_key}}


@dataclass(frozen=True, slots=True)
class AddFullAccessKey:
    """Add a full access key to the batch's target account."""

    public_key: str
    nonce: int = 0

    def __post_init__(self) -> None:
        _check_range("nonce", self.nonce, U64_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {"add_full_access_key": {"public_key": self.public_key, "nonce": self.nonce}}


@dataclass(frozen=True, slots=True)
class AddFunctionCallKey:
    """Add a key restricted to calling some methods of one receiver.

    An allowance of None means the key has unlimited allowance.
    An empty function_names tuple means any method of the receiver.
    """

    public_key: str
    receiver_id: AccountId
    nonce: int = 0
    allowance: int | None = None
    function_names: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        _check_range("nonce", self.nonce, U64_MAX)
        if self.allowance is not None:
            _check_range("allowance", self.allowance, U128_MAX)
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "function_names", tuple(self.function_names))

    def to_dict(self) -> dict[str, Any]:
        return {
            "add_function_call_key": {
                "public_key": self.public_key,
                "nonce": self.nonce,
                "allowance": self.allowance,
                "receiver_id": self.receiver_id,
                "function_names": list(self.function_names),
            }
        }


@dataclass(frozen=True, slots=True)
class DeleteKey:
    """Remove a key from the batch's target account."""

    public_key: str

    def to_dict(self) -> dict[str, Any]:
        return {"delete_key": {"public_key": self.public_key}}


@dataclass(frozen=True, slots=True)
class DeleteAccount:
    """Delete the batch's target account, sending its balance to beneficiary_id."""

    beneficiary_id: AccountId

    def to_dict(self) -> dict[str, Any]:
        return {"delete_account": {"beneficiary_id": self.beneficiary_id}}


PromiseAction = (
    CreateAccount
    | Transfer
    | DeployContract
    | FunctionCall
    | Stake
    | AddFullAccessKey
    | AddFunctionCallKey
    | DeleteKey
    | DeleteAccount
)
"""One low-level account operation inside a batch."""


@dataclass(frozen=True, slots=True)
class PromiseBatchAction:
    """An ordered bundle of account operations scheduled as one unit.

    Attributes:
        target_account_id: Account every action applies to
        actions: Operations, executed in order by the host
    """

    target_account_id: AccountId
    actions: tuple[PromiseAction, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "actions", tuple(self.actions))

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_account_id": self.target_account_id,
            "actions": [action.to_dict() for action in self.actions],
        }
