"""
Runtime package: the transition engine and the name registry it works with.
"""

from .engine import TransitionEngine
from .registry import StateRegistry

__all__ = ["TransitionEngine", "StateRegistry"]
