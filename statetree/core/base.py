# statetree/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, field
from typing import Callable, List


@dataclass(eq=False)
class NodeBase:
    """Base class for node callback handling"""

    name: str
    enter_callbacks: List[Callable[[], None]] = field(default_factory=list)
    exit_callbacks: List[Callable[[], None]] = field(default_factory=list)

    def __hash__(self) -> int:
        """Make nodes hashable based on their name and memory address."""
        return hash((self.name, id(self)))

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they are the same object."""
        if not isinstance(other, NodeBase):
            return NotImplemented
        return id(self) == id(other)

    def on_enter(self) -> None:
        """Execute enter callbacks"""
        for callback in self.enter_callbacks:
            callback()

    def on_exit(self) -> None:
        """Execute exit callbacks"""
        for callback in self.exit_callbacks:
            callback()
