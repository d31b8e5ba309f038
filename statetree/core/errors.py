# statetree/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class StateTreeError(Exception):
    """
    Base exception class for errors within the state tree library.
    """


class DuplicateNameError(StateTreeError):
    """
    Raised when a new state's name is already registered in the tree.
    """


class ConfigurationError(StateTreeError):
    """
    Raised when builder calls are contradictory or malformed, or when the tree
    is modified after it has been frozen.
    """


class InvalidNodeError(StateTreeError):
    """
    Raised when an operation targets a node that does not belong to the tree.
    """


class NotFoundError(StateTreeError):
    """
    Raised when a requested state name does not exist in the tree.
    """
