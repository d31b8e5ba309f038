# tests/integration/test_tree_properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from statetree import StateTree

NAMES = ["root", "a", "a1", "a2", "a2x", "a2y", "b", "b1", "b1x", "b1y", "b2", "b2x", "b2y"]


def build_tree(prefer_history: bool) -> StateTree:
    """
    root
    ├─ a [default]
    │   ├─ a1 [default]
    │   └─ a2
    │       ├─ a2x [default]
    │       └─ a2y
    └─ b (concurrent)
        ├─ b1
        │   ├─ b1x [default]
        │   └─ b1y
        └─ b2
            ├─ b2x
            └─ b2y
    """
    tree = StateTree()
    a = tree.root.sub_state("a").default_sub_state()
    a.sub_state("a1").default_sub_state()
    a2 = a.sub_state("a2")
    a2.sub_state("a2x").default_sub_state()
    a2.sub_state("a2y")
    b = tree.root.sub_state("b").concurrent_sub_states()
    b1 = b.sub_state("b1")
    b1.sub_state("b1x").default_sub_state()
    b1.sub_state("b1y")
    b2 = b.sub_state("b2")
    b2.sub_state("b2x")
    b2.sub_state("b2y")
    if prefer_history:
        tree.default_to_history_state()
    return tree


def snapshot(tree: StateTree):
    return {node.name: node.is_active for node in tree}


def assert_structure(tree: StateTree) -> None:
    for node in tree:
        if node.is_active and node.parent is not None:
            assert node.parent.is_active, f"{node.name} active under inactive parent"
        if not node.is_concurrent_parent:
            assert len(node.active_children) <= 1, f"{node.name} has several active children"
        if node.history is not None:
            assert node.history.parent is node


def branch_of(node, concurrent_parent):
    """The child of concurrent_parent on node's path, or None."""
    for ancestor in node.path():
        if ancestor.parent is concurrent_parent:
            return ancestor
    return None


@pytest.mark.property
@settings(max_examples=200, deadline=None)
@given(moves=st.lists(st.sampled_from(NAMES), min_size=1, max_size=25), prefer_history=st.booleans())
def test_random_transitions_keep_invariants(moves, prefer_history):
    tree = build_tree(prefer_history)
    b = tree.state_from_name("b")
    entered_before = set()

    for name in moves:
        target = tree.state_from_name(name)
        before = snapshot(tree)
        target.go_to()
        after = snapshot(tree)

        assert_structure(tree)
        assert all(node.is_active for node in target.path())

        # Regions of b not on the target's path are untouched while b stays active.
        slot = branch_of(target, b)
        if before["b"] and after["b"]:
            for region in b.children:
                if region is slot:
                    continue
                for node in tree.registry.walk(region):
                    assert before[node.name] == after[node.name]

        # History only ever names children that were entered at some point.
        entered_before.update(n for n, is_active in after.items() if is_active)
        for node in tree:
            if node.history is not None:
                assert node.history.name in entered_before


@pytest.mark.property
@given(moves=st.lists(st.sampled_from(NAMES), min_size=1, max_size=15))
def test_repeating_a_transition_is_a_noop(moves):
    tree = build_tree(prefer_history=False)
    calls = []
    tree.enter(lambda node: calls.append(node.name))
    tree.exit(lambda node: calls.append(node.name))
    for name in moves:
        tree.state_from_name(name).go_to()
    target = tree.state_from_name(moves[-1])
    before = snapshot(tree)
    histories = {node.name: node.history for node in tree}
    calls.clear()

    target.go_to()

    assert calls == []
    assert snapshot(tree) == before
    assert {node.name: node.history for node in tree} == histories


@pytest.mark.property
@given(leaf=st.sampled_from(["a1", "a2x", "a2y"]))
def test_history_fidelity(leaf):
    tree = build_tree(prefer_history=True)
    tree.state_from_name(leaf).go_to()
    parent = tree.state_from_name(leaf).parent

    tree.state_from_name("b").go_to()
    assert parent.history.name == leaf

    tree.state_from_name("a").go_to()
    assert tree.state_from_name(leaf).is_active
