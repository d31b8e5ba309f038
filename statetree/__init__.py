"""statetree: hierarchical and concurrent state container

This package tracks which combination of application states is active and
runs the matching exit/enter callbacks when the active configuration changes.

Responsibilities:
    - State hierarchy definition through chainable builder calls
    - Concurrent regions that change independently of each other
    - Default and history sub-state resolution
    - Re-entrant transitions started from inside callbacks

Interactions:
    - Client code (UI handlers, routing adapters) through the public API
    - Logging system for diagnostics

Cross-cutting Concerns:
    Threading:
        - Single-threaded and synchronous; no locks are taken

    Error Handling:
        - Structured error hierarchy rooted at StateTreeError
        - Builder and lookup errors raised immediately

    Logging:
        - Module loggers under the ``statetree`` namespace
        - Transitions logged at DEBUG level
"""

from statetree.core import (
    ConfigurationError,
    DuplicateNameError,
    Hook,
    HookManager,
    InvalidNodeError,
    NotFoundError,
    StateNode,
    StateTree,
    StateTreeError,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    "StateTree",
    "StateNode",
    "Hook",
    "HookManager",
    "Validator",
    "StateTreeError",
    "DuplicateNameError",
    "ConfigurationError",
    "InvalidNodeError",
    "NotFoundError",
]
