# statetree/runtime/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Name registry and structural traversal for a state tree."""

from typing import Dict, Iterator, List, Optional

from ..core.errors import DuplicateNameError, NotFoundError
from ..core.states import StateNode


class StateRegistry:
    """
    Maps state names to nodes for one tree and provides depth-first traversal.
    Names stay reserved for the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, StateNode] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[StateNode]:
        return iter(list(self._nodes.values()))

    def register(self, node: StateNode) -> None:
        """Add a node under its name, refusing names already in use."""
        existing = self._nodes.get(node.name)
        if existing is not None:
            parent = existing.parent
            raise DuplicateNameError(
                f"State '{node.name}' already exists under '{parent.name if parent else None}'"
            )
        self._nodes[node.name] = node

    def get(self, name: str) -> StateNode:
        node = self._nodes.get(name)
        if node is None:
            raise NotFoundError(f"No state named '{name}'")
        return node

    def find(self, name: str) -> Optional[StateNode]:
        return self._nodes.get(name)

    def owns(self, node: StateNode) -> bool:
        return self._nodes.get(node.name) is node

    def walk(self, start: StateNode, active_only: bool = False) -> Iterator[StateNode]:
        """Depth-first, pre-order traversal in child registration order."""
        if active_only and not start.is_active:
            return
        stack: List[StateNode] = [start]
        while stack:
            node = stack.pop()
            yield node
            children = node.active_children if active_only else node.children
            stack.extend(reversed(children))

    def clear_history(self) -> None:
        """Forget every recorded history child."""
        for node in self._nodes.values():
            node._clear_history()
