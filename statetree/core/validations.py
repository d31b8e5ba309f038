# statetree/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from statetree.core.state_tree import StateTree


class Validator:
    """
    Inspects a built tree for configurations that are legal but usually
    unintended. Findings are returned as messages; nothing is raised.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_tree(self, tree: "StateTree") -> List[str]:
        """
        Check every node of the tree.

        :param tree: The tree to inspect.
        :return: One message per finding, in depth-first order.
        """
        findings: List[str] = []
        for node in tree.registry.walk(tree.root):
            findings.extend(self._default_rules.check_default(node))
        return findings


class _DefaultValidationRules:
    """
    Built-in rules about how composite nodes pick a child on entry.
    """

    @staticmethod
    def check_default(node) -> List[str]:
        """
        - A non-concurrent composite without a default stops on entry with no
          active child unless history is available.
        - A default under a concurrent parent is never entered automatically.
        """
        if node.is_leaf:
            return []
        if node.is_concurrent_parent:
            if node.default_child is not None:
                return [
                    f"Default sub-state '{node.default_child.name}' of concurrent state "
                    f"'{node.name}' is never entered automatically"
                ]
            return []
        if node.default_child is None:
            return [f"State '{node.name}' has sub-states but no default sub-state"]
        return []
