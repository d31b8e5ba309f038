# statetree/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from statetree.core.states import StateNode


@runtime_checkable
class HookProtocol(Protocol):
    """
    Structural type for objects observing every node enter/exit in a tree.
    Any method may be omitted; missing methods are skipped.
    """

    def on_enter(self, node: "StateNode") -> None: ...

    def on_exit(self, node: "StateNode") -> None: ...

    def on_error(self, error: Exception) -> None: ...


class Hook:
    """
    No-op base hook. Subclass and override the lifecycle methods you need.
    """

    def on_enter(self, node: "StateNode") -> None:
        pass

    def on_exit(self, node: "StateNode") -> None:
        pass

    def on_error(self, error: Exception) -> None:
        pass


class _CallbackHook(Hook):
    """Adapts a plain tree-wide callback into a hook."""

    def __init__(
        self,
        enter: Optional[Callable[["StateNode"], None]] = None,
        exit: Optional[Callable[["StateNode"], None]] = None,
    ) -> None:
        self._enter = enter
        self._exit = exit

    def on_enter(self, node: "StateNode") -> None:
        if self._enter is not None:
            self._enter(node)

    def on_exit(self, node: "StateNode") -> None:
        if self._exit is not None:
            self._exit(node)


class HookManager:
    """
    Manages the registration and execution of hooks that listen to every node
    enter and exit in a tree. Users can attach logging, routing or custom side
    effects without altering core logic.

    Plain tree-wide callbacks and hook objects share a single ordered list, so
    registration order is preserved across both kinds.
    """

    def __init__(self, hooks: List[HookProtocol] = None) -> None:
        """
        :param hooks: Optional initial hooks, kept in the given order.
        """
        self._hooks: List[HookProtocol] = list(hooks or [])

    def __len__(self) -> int:
        return len(self._hooks)

    def register_hook(self, hook: HookProtocol) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing any of the HookProtocol methods.
        """
        self._hooks.append(hook)

    def register_enter(self, callback: Callable[["StateNode"], None]) -> None:
        self._hooks.append(_CallbackHook(enter=callback))

    def register_exit(self, callback: Callable[["StateNode"], None]) -> None:
        self._hooks.append(_CallbackHook(exit=callback))

    def execute_on_enter(self, node: "StateNode") -> None:
        """
        Run all hooks' on_enter logic when entering a node.
        """
        for hook in list(self._hooks):
            if hasattr(hook, "on_enter"):
                hook.on_enter(node)

    def execute_on_exit(self, node: "StateNode") -> None:
        """
        Run all hooks' on_exit logic when exiting a node.
        """
        for hook in list(self._hooks):
            if hasattr(hook, "on_exit"):
                hook.on_exit(node)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when a callback raised during a transition.
        """
        for hook in list(self._hooks):
            if hasattr(hook, "on_error"):
                hook.on_error(error)
