# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree builder - flat keyed collection to nested forest.

Each record of the flat collection names its parent through the parent key.
build_tree copies every record, attaches an empty children list to each copy
and links the copies under their parents. Records without a resolvable
parent become roots.

Example:
    >>> flat = {
    ...     'A': {'id': 'A'},
    ...     'B': {'id': 'B', 'parentId': 'A'},
    ...     'C': {'id': 'C', 'parentId': 'Z'},
    ... }
    >>> roots = build_tree(flat)
    >>> [r['id'] for r in roots]
    ['A', 'C']
    >>> roots[0]['children'][0]['id']
    'B'
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .keys import DEFAULT_CHILDREN_KEY, DEFAULT_PARENT_KEY, check_keys
from .sorting import (
    Comparator,
    SortOrder,
    SortSpec,
    make_sort_spec,
    sort_forest,
    validate_order,
)

logger = logging.getLogger(__name__)


def build_tree(
    flat: Mapping[str, Mapping[str, Any]],
    children_key: str = DEFAULT_CHILDREN_KEY,
    parent_key: str = DEFAULT_PARENT_KEY,
    sort: SortSpec | str | Comparator | None = None,
    order: SortOrder = 'asc',
) -> list[dict[str, Any]]:
    """Build a forest from a flat collection keyed by identifier.

    The input is never mutated: every output node is a shallow copy of an
    input record with a new list under children_key. Parents are looked up
    by the keys of the flat collection, not by the records' id field.

    A record is a root when its parent id is missing, not a string, empty,
    equal to its own key, or not a key of the collection. Two records naming
    each other as parent attach to each other and neither becomes a root.

    Args:
        flat: Mapping of identifier to record.
        children_key: Field that receives the children list.
        parent_key: Field holding the parent identifier.
        sort: Sibling ordering. None keeps input order, a string sorts by
            that field (see sorting.compare_values), a callable is used as a
            three-way comparator over two nodes.
        order: 'asc' (default) or 'desc'.

    Returns:
        List of root nodes in input order, or sorted when sort is given.

    Raises:
        InvalidKeyError: If parent_key or children_key is empty, or both
            name the same field.
        InvalidSortError: If sort is not an accepted form.
        InvalidOrderError: If order is not 'asc' or 'desc'.
    """
    check_keys(parent_key=parent_key, children_key=children_key)
    spec = make_sort_spec(sort)
    # checked here too so a bad order fails even when no sort is requested
    validate_order(order)

    nodes: dict[str, dict[str, Any]] = {}
    for node_id, record in flat.items():
        nodes[node_id] = {**record, children_key: []}

    roots: list[dict[str, Any]] = []
    dangling = 0

    for node_id, node in nodes.items():
        parent_id = node.get(parent_key)
        parent = None
        if isinstance(parent_id, str) and parent_id and parent_id != node_id:
            parent = nodes.get(parent_id)
            if parent is None:
                dangling += 1
        if parent is not None:
            parent[children_key].append(node)
        else:
            roots.append(node)

    logger.debug(
        "build_tree: %d nodes, %d roots, %d unresolved parent ids",
        len(nodes), len(roots), dangling,
    )

    comparator = spec.comparator()
    if comparator is not None:
        sort_forest(roots, comparator, children_key, order)

    return roots
