"""Text rendering of promise trees for assertion messages and debugging.

Structure:
    then
    ├── and
    │   ├── create token.near.ft_transfer (gas=5000000000000)
    │   └── create token.near.ft_balance_of
    └── batch alice.near [2 actions]

Each line names the node kind; leaves add the target and method (calls)
or the action count (batches).
"""

from typing import assert_never

from promise_recorder.contracts.tree import (
    AndPromise,
    BatchPromise,
    CreatePromise,
    PromiseTree,
    ThenPromise,
)


def _label(tree: PromiseTree) -> str:
    match tree:
        case CreatePromise(args=args):
            label = f"create {args.target_account_id}.{args.method}"
            extras = []
            if args.attached_gas:
                extras.append(f"gas={args.attached_gas}")
            if args.attached_balance:
                extras.append(f"deposit={args.attached_balance}")
            if extras:
                label += f" ({', '.join(extras)})"
            return label
        case BatchPromise(action=action):
            count = len(action.actions)
            return f"batch {action.target_account_id} [{count} action{'' if count == 1 else 's'}]"
        case AndPromise():
            return "and"
        case ThenPromise():
            return "then"
        case _:
            assert_never(tree)


def _children(tree: PromiseTree) -> tuple[PromiseTree, ...]:
    if isinstance(tree, AndPromise):
        return tree.children
    if isinstance(tree, ThenPromise):
        return (tree.base, tree.callback)
    return ()


def render_promise_tree(tree: PromiseTree) -> str:
    """Render tree as indented box-drawing text.

    Args:
        tree: Tree to render

    Returns:
        Multi-line string, no trailing newline
    """
    lines = [_label(tree)]

    def _walk(node: PromiseTree, prefix: str) -> None:
        children = _children(node)
        for i, child in enumerate(children):
            last = i == len(children) - 1
            lines.append(f"{prefix}{'└── ' if last else '├── '}{_label(child)}")
            _walk(child, prefix + ("    " if last else "│   "))

    _walk(tree, "")
    return "\n".join(lines)
