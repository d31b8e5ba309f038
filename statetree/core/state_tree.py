# statetree/core/state_tree.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Callable, Iterator, List, Optional

from statetree.core.errors import ConfigurationError, InvalidNodeError
from statetree.core.hooks import HookManager, HookProtocol
from statetree.core.states import StateNode
from statetree.core.validations import Validator
from statetree.runtime.engine import TransitionEngine
from statetree.runtime.registry import StateRegistry

logger = logging.getLogger(__name__)


class StateTree:
    """
    A hierarchy of states with concurrent regions, default and history
    sub-states, and the active configuration of that hierarchy.

    Build the tree from ``root`` with ``sub_state``, ``concurrent_sub_states``,
    ``default_sub_state``, ``enter`` and ``exit``; then drive it with
    ``go_to``. Tree-wide callbacks receive the node being entered or exited and
    run before a node's own enter callbacks and after its own exit callbacks.
    """

    def __init__(self, root_name: str = "root", hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        :param root_name: Name the root is registered under; reserved for the tree's lifetime.
        :param hooks: Optional hook objects notified of every enter, exit and callback error.
        """
        if not root_name or not isinstance(root_name, str):
            raise ConfigurationError("Root name must be a non-empty string")
        self._registry = StateRegistry()
        self._hooks = HookManager(hooks)
        self._validator = Validator()
        self._prefer_history = False
        self._frozen = False
        self._root = StateNode(root_name, tree=self)
        self._registry.register(self._root)
        self._engine = TransitionEngine(self)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[StateNode]:
        return iter(self._registry)

    @property
    def root(self) -> StateNode:
        return self._root

    @property
    def registry(self) -> StateRegistry:
        return self._registry

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    @property
    def prefer_history(self) -> bool:
        return self._prefer_history

    @property
    def frozen(self) -> bool:
        return self._frozen

    def state_from_name(self, name: str) -> StateNode:
        """
        Look up a state by name.

        :raises NotFoundError: If no state has that name.
        :raises InvalidNodeError: If ``name`` is not a string.
        """
        if not isinstance(name, str):
            raise InvalidNodeError(f"State names are strings, got {type(name).__name__}")
        return self._registry.get(name)

    def find(self, name: str) -> Optional[StateNode]:
        """Like ``state_from_name`` but returns None for unknown names."""
        return self._registry.find(name)

    def default_to_history_state(self) -> "StateTree":
        """Prefer a composite's history child over its default child on entry."""
        self._prefer_history = True
        return self

    def enter(self, callback: Callable[[StateNode], None]) -> "StateTree":
        """Register a callback run with each node as it is entered."""
        self._ensure_building()
        if not callable(callback):
            raise ConfigurationError("Tree enter callback must be callable")
        self._hooks.register_enter(callback)
        return self

    def exit(self, callback: Callable[[StateNode], None]) -> "StateTree":
        """Register a callback run with each node as it is exited."""
        self._ensure_building()
        if not callable(callback):
            raise ConfigurationError("Tree exit callback must be callable")
        self._hooks.register_exit(callback)
        return self

    def add_hook(self, hook: HookProtocol) -> "StateTree":
        self._ensure_building()
        self._hooks.register_hook(hook)
        return self

    def go_to(self, node: StateNode) -> None:
        self._engine.go_to(node)

    def active_states(self) -> List[StateNode]:
        """Every active node, depth-first in registration order."""
        return list(self._registry.walk(self._root, active_only=True))

    def current_states(self) -> List[StateNode]:
        """Active nodes with no active child: the current state of each active branch."""
        return [node for node in self._registry.walk(self._root, active_only=True) if not node.active_children]

    def clear_history(self) -> None:
        self._registry.clear_history()

    def validate(self) -> List[str]:
        """Expose the validator's findings for this tree."""
        return self._validator.validate_tree(self)

    def freeze(self) -> "StateTree":
        """
        End the builder phase. Later builder calls raise ConfigurationError.
        Validation findings are logged as warnings.
        """
        for finding in self.validate():
            logger.warning(finding)
        self._frozen = True
        return self

    def _ensure_building(self) -> None:
        if self._frozen:
            raise ConfigurationError("State tree is frozen; it can no longer be modified")
