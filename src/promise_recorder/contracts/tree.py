# src/promise_recorder/contracts/tree.py
"""Symbolic promise trees.

A PromiseTree is what the host would actually be asked to execute once
the flat scheduling requests are folded together:

- CreatePromise / BatchPromise: a single call or batch (leaves)
- AndPromise: independent promises combined without ordering
- ThenPromise: base must fully resolve before callback runs

The variant set is closed. Consumers match on it exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, assert_never

from promise_recorder.contracts.payloads import PromiseBatchAction, PromiseCreateArgs


@dataclass(frozen=True, slots=True)
class CreatePromise:
    """Leaf: a single function call."""

    args: PromiseCreateArgs


@dataclass(frozen=True, slots=True)
class BatchPromise:
    """Leaf: a batch of account actions."""

    action: PromiseBatchAction


@dataclass(frozen=True, slots=True)
class AndPromise:
    """Parallel composition. Child order is the order the calls were given in."""

    children: tuple[PromiseTree, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class ThenPromise:
    """Sequential composition: callback runs after base resolves."""

    base: PromiseTree
    callback: SimplePromise


SimplePromise = CreatePromise | BatchPromise
PromiseTree = CreatePromise | BatchPromise | AndPromise | ThenPromise


def promise_to_dict(tree: PromiseTree) -> dict[str, Any]:
    """Convert a tree into tagged nested dicts.

    Leaves become {"simple": {"create": ...}} or {"simple": {"batch": ...}}.
    Byte payloads are left as bytes; canonical_json() encodes them.

    Args:
        tree: Tree to convert

    Returns:
        Nested dict mirroring the tree structure
    """
    match tree:
        case CreatePromise(args=args):
            return {"simple": {"create": args.to_dict()}}
        case BatchPromise(action=action):
            return {"simple": {"batch": action.to_dict()}}
        case AndPromise(children=children):
            return {"and": [promise_to_dict(child) for child in children]}
        case ThenPromise(base=base, callback=callback):
            return {"then": {"base": promise_to_dict(base), "callback": promise_to_dict(callback)["simple"]}}
        case _:
            assert_never(tree)
