# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List
from unittest.mock import MagicMock

import pytest

from statetree import StateTree


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def record_callbacks(tree: StateTree, calls: List[str]) -> None:
    """Append '<name>.enter' / '<name>.exit' to calls for every node of the tree."""
    for node in tree:
        node.enter(lambda n=node: calls.append(f"{n.name}.enter"))
        node.exit(lambda n=node: calls.append(f"{n.name}.exit"))


@pytest.fixture
def tree():
    """An empty tree with only a root."""
    return StateTree()


@pytest.fixture
def calls():
    """Shared list that recording callbacks append to."""
    return []


@pytest.fixture
def flat_tree(calls):
    """
    root
    └─ parent
        ├─ l1 [default]
        └─ l2
    """
    t = StateTree()
    parent = t.root.sub_state("parent")
    parent.sub_state("l1").default_sub_state()
    parent.sub_state("l2")
    record_callbacks(t, calls)
    return t


@pytest.fixture
def app_tree(calls):
    """
    root
    ├─ loggedout [default]
    └─ loggedin (concurrent)
        ├─ main
        │   ├─ tab1 [default]
        │   └─ tab2
        └─ popup
            ├─ closed [default]
            └─ open

    Entering loggedin starts both of its regions.
    """
    t = StateTree()
    t.root.sub_state("loggedout").default_sub_state()
    loggedin = t.root.sub_state("loggedin").concurrent_sub_states()
    main = loggedin.sub_state("main")
    main.sub_state("tab1").default_sub_state()
    main.sub_state("tab2")
    popup = loggedin.sub_state("popup")
    popup.sub_state("closed").default_sub_state()
    popup.sub_state("open")
    record_callbacks(t, calls)
    loggedin.enter(lambda: (main.go_to(), popup.go_to()))
    return t


@pytest.fixture
def dummy_hook():
    """A hook double with on_enter(node), on_exit(node) and on_error(error)."""
    hook = MagicMock()
    hook.on_enter = MagicMock()
    hook.on_exit = MagicMock()
    hook.on_error = MagicMock()
    return hook
