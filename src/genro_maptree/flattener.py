# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Flattener - nested forest to flat keyed collection."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from .keys import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY, DEFAULT_PARENT_KEY, TreeKeys

logger = logging.getLogger(__name__)


def _children_of(node: Mapping[str, Any], children_key: str) -> list | tuple:
    children = node.get(children_key)
    if isinstance(children, (list, tuple)):
        return children
    return ()


def walk_tree(
    roots: Iterable[Mapping[str, Any]],
    children_key: str = DEFAULT_CHILDREN_KEY,
    id_key: str = DEFAULT_ID_KEY,
) -> Iterator[tuple[Mapping[str, Any], str | None, int]]:
    """Walk a forest in pre-order.

    Each root is followed by its whole subtree before the next root.
    Children are only visited when the children field is a non-empty list
    or tuple. Nodes are yielded as they are, not copied.

    Args:
        roots: Root nodes.
        children_key: Field holding the children.
        id_key: Field holding the identifier, used for parent ids.

    Yields:
        Tuples of (node, parent_id, depth). parent_id is the string form of
        the parent's identifier (str(None) when the parent has no id),
        None for roots. Roots have depth 0.

    Example:
        >>> tree = [{'id': 1, 'children': [{'id': 2}]}]
        >>> [(n['id'], p, d) for n, p, d in walk_tree(tree)]
        [(1, None, 0), (2, '1', 1)]
    """
    stack: list[tuple[Mapping[str, Any], str | None, int]] = [
        (root, None, 0) for root in reversed(list(roots))
    ]
    while stack:
        node, parent_id, depth = stack.pop()
        yield node, parent_id, depth
        children = _children_of(node, children_key)
        if children:
            node_id = str(node.get(id_key))
            stack.extend((child, node_id, depth + 1) for child in reversed(children))


def flatten_tree(
    roots: Iterable[Mapping[str, Any]],
    children_key: str = DEFAULT_CHILDREN_KEY,
    parent_key: str = DEFAULT_PARENT_KEY,
    id_key: str = DEFAULT_ID_KEY,
) -> dict[str, dict[str, Any]]:
    """Flatten a forest into a dict keyed by the string form of each id.

    Every visited node becomes a shallow copy without children_key. Nodes
    below a parent get parent_key set to the parent's id; roots keep
    whatever parent_key value they already had, if any.

    The output follows pre-order. A repeated id overwrites the earlier
    entry and keeps its position. A node without id_key is keyed
    by str(None), like a node whose id is None.

    Args:
        roots: Root nodes. An already flat list of records is accepted and
            yields one entry per record.
        children_key: Field holding the children.
        parent_key: Field that receives the parent identifier.
        id_key: Field holding the identifier.

    Returns:
        Dict of str(id) to flat record.

    Raises:
        InvalidKeyError: If the key names are empty or collide.

    Example:
        >>> tree = [{'id': '1', 'children': [{'id': '2', 'children': []}]}]
        >>> flatten_tree(tree)
        {'1': {'id': '1'}, '2': {'id': '2', 'parentId': '1'}}
    """
    keys = TreeKeys(id_key=id_key, parent_key=parent_key, children_key=children_key)

    result: dict[str, dict[str, Any]] = {}
    for node, parent_id, _depth in walk_tree(roots, keys.children_key, keys.id_key):
        record = dict(node)
        record.pop(keys.children_key, None)
        if parent_id:
            record[keys.parent_key] = parent_id
        node_id = str(node.get(keys.id_key))
        if node_id in result:
            logger.debug("flatten_tree: duplicate id %r overwrites earlier entry", node_id)
        result[node_id] = record

    logger.debug("flatten_tree: %d records", len(result))
    return result
