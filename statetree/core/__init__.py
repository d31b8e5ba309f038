"""
Core package providing the state tree structure and builder surface.

Architecture:
- StateNode holds structure, callbacks and runtime flags
- StateTree owns the root, the name registry and tree-wide hooks
- Transitions are delegated to statetree.runtime.engine
"""

# Import order matters to avoid circular dependencies
from .errors import ConfigurationError, DuplicateNameError, InvalidNodeError, NotFoundError, StateTreeError
from .hooks import Hook, HookManager, HookProtocol
from .states import StateNode
from .validations import Validator
from .state_tree import StateTree

__all__ = [
    # Structure
    "StateNode",
    "StateTree",
    # Hooks and validation
    "Hook",
    "HookManager",
    "HookProtocol",
    "Validator",
    # Errors
    "StateTreeError",
    "DuplicateNameError",
    "ConfigurationError",
    "InvalidNodeError",
    "NotFoundError",
]
