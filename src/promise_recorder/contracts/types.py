"""Semantic type aliases for promise scheduling.

NewType creates distinct types that mypy treats as incompatible,
preventing a promise handle from being confused with an arbitrary int.
"""

from typing import NewType

PromiseId = NewType("PromiseId", int)
"""Opaque handle for a scheduled promise, allocated from 0 per tracker."""

AccountId = NewType("AccountId", str)
"""Account name a promise is addressed to (e.g., 'token.near')."""

# Host integer widths for handles, gas and balances
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
