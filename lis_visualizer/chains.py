"""Pure functions for predecessor chains.

A chain is the concrete increasing run that ends at some index: start at the
index and follow ``predecessors`` until the sentinel, then reverse.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import SENTINEL


def build_chain(start_index: int, predecessors: Sequence[int]) -> list[int]:
    """Walk ``predecessors`` from ``start_index`` back to the root.

    Args:
        start_index: Index at which the chain ends.
        predecessors: ``predecessors[i]`` is the index preceding ``i``, or -1.

    Returns:
        Indices from root to ``start_index``. Empty when ``start_index`` is
        out of range. A revisited index ends the walk, so malformed
        predecessor data cannot loop forever.
    """
    if start_index < 0 or start_index >= len(predecessors):
        return []

    chain: list[int] = []
    visited: set[int] = set()
    current = start_index
    while current != SENTINEL and 0 <= current < len(predecessors):
        if current in visited:
            break
        visited.add(current)
        chain.append(current)
        current = predecessors[current]

    chain.reverse()
    return chain


def build_all_chains(
    sequence: Sequence[int], predecessors: Sequence[int]
) -> list[list[int]]:
    """Return one chain per ``sequence`` position; ``chains[k]`` has length k + 1."""
    return [build_chain(index, predecessors) for index in sequence]


def chain_at(
    position: int, sequence: Sequence[int], predecessors: Sequence[int]
) -> list[int] | None:
    """Chain for ``sequence[position]``, or None when the position is out of range."""
    if position < 0 or position >= len(sequence):
        return None
    return build_chain(sequence[position], predecessors)


def compute_changed_nodes_by_chain(
    chains: Sequence[Sequence[int]],
    previous_chains: Sequence[Sequence[int]] | None,
    is_chain_action: bool,
    highlight_pred_index: int,
) -> dict[int, set[int]]:
    """Find the nodes of each chain that differ from the previous step.

    With a previous chain at the same position the two are compared slot by
    slot. Without one, a chain produced by an append or replace that contains
    ``highlight_pred_index`` is new in its entirety.

    Returns:
        ``{chain_position: changed_node_indices}``; positions without changes
        are omitted.
    """
    changed: dict[int, set[int]] = {}

    for chain_position, chain in enumerate(chains):
        previous_chain = None
        if previous_chains is not None and chain_position < len(previous_chains):
            previous_chain = previous_chains[chain_position]

        nodes: set[int] = set()
        if previous_chain is not None:
            for slot, node in enumerate(chain):
                if slot >= len(previous_chain) or previous_chain[slot] != node:
                    nodes.add(node)
        elif is_chain_action and highlight_pred_index >= 0 and highlight_pred_index in chain:
            nodes.update(chain)

        if nodes:
            changed[chain_position] = nodes

    return changed
