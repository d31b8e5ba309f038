# statetree/runtime/engine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Transition engine computing and applying exit/enter sequences."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..core.errors import InvalidNodeError
from ..core.states import StateNode

if TYPE_CHECKING:
    from ..core.state_tree import StateTree

logger = logging.getLogger(__name__)


class TransitionEngine:
    """
    Runs ``go_to`` against a tree's active configuration.

    A transition enters the path from the root to the target, exiting first
    whatever occupies the non-concurrent slots on that path, then resolves
    history or default children below the target. Callbacks may start nested
    transitions; those run to completion on the ordinary call stack, and the
    outer transition re-reads the active flags at every remaining step.
    """

    def __init__(self, tree: "StateTree") -> None:
        self._tree = tree
        self._depth = 0
        self._last_reported: Optional[BaseException] = None

    def go_to(self, target: StateNode) -> None:
        """
        Make ``target`` active.

        :param target: A node owned by this engine's tree.
        :raises InvalidNodeError: If ``target`` belongs to another tree.
        """
        if not isinstance(target, StateNode) or not self._tree.registry.owns(target):
            raise InvalidNodeError(f"{target!r} does not belong to this state tree")

        self._depth += 1
        try:
            self._transition(target)
        except Exception as error:
            # Enclosing transitions see the same error again, report it once.
            if error is not self._last_reported:
                self._last_reported = error
                self._report(target, error)
            raise
        finally:
            self._depth -= 1

    def _report(self, target: StateNode, error: Exception) -> None:
        logger.exception("Transition to '%s' failed", target.name)
        try:
            self._tree.hooks.execute_on_error(error)
        except Exception:
            logger.exception("Error hook failed while reporting failure of '%s'", target.name)

    def _transition(self, target: StateNode) -> None:
        path = target.path()
        split = next((i for i, node in enumerate(path) if not node.is_active), len(path))
        pivot = path[split - 1] if split else None
        logger.debug(
            "Transition to '%s' (pivot: %s, depth: %d)",
            target.name,
            pivot.name if pivot is not None else None,
            self._depth,
        )

        for node in path[split:]:
            if not self._enter_path_node(node, target):
                return

        if target.is_active:
            self._resolve(target)

    def _enter_path_node(self, node: StateNode, target: StateNode) -> bool:
        """Enter one node of the target path; False when the transition was superseded."""
        if node.is_active:
            return True

        parent = node.parent
        if parent is not None:
            if not parent.is_active:
                logger.debug("Transition to '%s' superseded at '%s'", target.name, parent.name)
                return False
            if not parent.is_concurrent_parent:
                siblings = parent.active_children
                while siblings:
                    for sibling in siblings:
                        self._exit_subtree(sibling)
                    # Exit callbacks may have moved the configuration.
                    if node.is_active:
                        return True
                    if not parent.is_active:
                        logger.debug("Transition to '%s' superseded at '%s'", target.name, parent.name)
                        return False
                    siblings = parent.active_children

        self._enter(node)
        return True

    def _resolve(self, node: StateNode) -> None:
        """Follow history or default children below an active node with no active child."""
        while node.is_active and not node.is_concurrent_parent and not node.active_children:
            child = self._select_child(node)
            if child is None:
                return
            self._enter(child)
            node = child

    def _select_child(self, node: StateNode) -> Optional[StateNode]:
        if self._tree.prefer_history and node.history is not None:
            return node.history
        return node.default_child

    def _exit_subtree(self, node: StateNode) -> None:
        """Exit the active part of a subtree, deepest nodes first."""
        if not node.is_active:
            return
        children = node.active_children
        while children:
            for child in children:
                self._exit_subtree(child)
            # Exit callbacks may have activated another child.
            children = node.active_children
        if node.is_active:
            self._exit(node)

    def _enter(self, node: StateNode) -> None:
        logger.debug("Entering '%s'", node.name)
        node._set_active(True)
        self._tree.hooks.execute_on_enter(node)
        node.on_enter()

    def _exit(self, node: StateNode) -> None:
        logger.debug("Exiting '%s'", node.name)
        node._set_active(False)
        node.on_exit()
        self._tree.hooks.execute_on_exit(node)
        parent = node.parent
        if parent is not None:
            parent._record_history(node)
