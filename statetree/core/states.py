# statetree/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple
from weakref import ReferenceType, ref

from statetree.core.base import NodeBase
from statetree.core.errors import ConfigurationError

if TYPE_CHECKING:
    from statetree.core.state_tree import StateTree


class StateNode(NodeBase):
    """
    A single state in a StateTree.

    Nodes are created through ``sub_state`` on an existing node and are never
    removed. The parent link is a weak back reference; ownership runs from
    parent to children, and every node keeps its tree alive. Only the
    transition engine changes ``is_active`` and ``history``.
    """

    def __init__(self, name: str, tree: "StateTree", parent: Optional["StateNode"] = None) -> None:
        """
        Nodes should be created with ``sub_state``; the root is created by the tree.

        :param name: Name identifying this state within the tree.
        :param tree: The owning tree.
        :param parent: The parent node, or None for the root.
        """
        super().__init__(name=name)
        self._tree = tree
        self._parent: Optional[ReferenceType["StateNode"]] = ref(parent) if parent is not None else None
        self._children: List["StateNode"] = []
        self._concurrent = False
        self._default_child: Optional["StateNode"] = None
        self._history_child: Optional["StateNode"] = None
        self._active = False

    def __repr__(self) -> str:
        flags = " active" if self._active else ""
        if self._concurrent:
            flags += " concurrent"
        return f"<StateNode {self.name!r}{flags}>"

    @property
    def tree(self) -> "StateTree":
        return self._tree

    @property
    def parent(self) -> Optional["StateNode"]:
        """Get the parent node."""
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> Tuple["StateNode", ...]:
        """Child nodes in registration order."""
        return tuple(self._children)

    @property
    def is_concurrent_parent(self) -> bool:
        return self._concurrent

    @property
    def default_child(self) -> Optional["StateNode"]:
        return self._default_child

    @property
    def history(self) -> Optional["StateNode"]:
        """The child that was active when this node last lost its active child."""
        return self._history_child

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def active_children(self) -> List["StateNode"]:
        return [child for child in self._children if child._active]

    # ------------------------------------------------------------------
    # Builder operations
    # ------------------------------------------------------------------

    def sub_state(self, name: str) -> "StateNode":
        """
        Create a child state and register it in the tree.

        :param name: Name unique within the whole tree.
        :return: The new child node.
        :raises DuplicateNameError: If the name is already registered.
        :raises ConfigurationError: If the name is not a non-empty string.
        """
        self._tree._ensure_building()
        if not name or not isinstance(name, str):
            raise ConfigurationError("State name must be a non-empty string")
        child = StateNode(name, tree=self._tree, parent=self)
        self._tree.registry.register(child)
        self._children.append(child)
        return child

    def concurrent_sub_states(self) -> "StateNode":
        """
        Mark this node's children as independent, simultaneously active branches.

        The flag is read at transition time, so it may be set before or after
        children are added. Already active children are left as they are.
        """
        self._tree._ensure_building()
        self._concurrent = True
        return self

    def default_sub_state(self) -> "StateNode":
        """
        Make this node the default child of its parent.

        The first default wins: naming a different default for the same parent
        raises ConfigurationError. Repeating the call is harmless.
        """
        self._tree._ensure_building()
        parent = self.parent
        if parent is None:
            raise ConfigurationError("The root state cannot be a default sub-state")
        if parent._default_child is not None and parent._default_child is not self:
            raise ConfigurationError(
                f"State '{parent.name}' already has default sub-state "
                f"'{parent._default_child.name}'; cannot also use '{self.name}'"
            )
        parent._default_child = self
        return self

    def enter(self, callback: Callable[[], None]) -> "StateNode":
        """Append a zero-argument callback run each time this node is entered."""
        self._tree._ensure_building()
        if not callable(callback):
            raise ConfigurationError(f"Enter callback for '{self.name}' must be callable")
        self.enter_callbacks.append(callback)
        return self

    def exit(self, callback: Callable[[], None]) -> "StateNode":
        """Append a zero-argument callback run each time this node is exited."""
        self._tree._ensure_building()
        if not callable(callback):
            raise ConfigurationError(f"Exit callback for '{self.name}' must be callable")
        self.exit_callbacks.append(callback)
        return self

    # ------------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------------

    def go_to(self) -> None:
        """Make this node active, exiting and entering whatever that requires."""
        self._tree.go_to(self)

    def ancestors(self) -> List["StateNode"]:
        """Ancestors ordered from the immediate parent up to the root."""
        result = []
        current = self.parent
        while current is not None:
            result.append(current)
            current = current.parent
        return result

    def path(self) -> List["StateNode"]:
        """Nodes from the root down to and including this node."""
        result = self.ancestors()
        result.reverse()
        result.append(self)
        return result

    def is_descendant_of(self, other: "StateNode") -> bool:
        return any(ancestor is other for ancestor in self.ancestors())

    def _set_active(self, active: bool) -> None:
        self._active = active

    def _record_history(self, child: "StateNode") -> None:
        self._history_child = child

    def _clear_history(self) -> None:
        self._history_child = None
