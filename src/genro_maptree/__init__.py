# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-MapTree - Conversion between flat keyed collections and nested trees.

A lightweight, zero-dependency library for the Genro ecosystem (Genro Kyō):
build_tree turns a dict of records linked by parent id into a forest,
flatten_tree turns a forest back into a dict keyed by id.
"""

import logging

__version__ = "0.1.0"

from .builder import build_tree
from .exceptions import (
    InvalidKeyError,
    InvalidOrderError,
    InvalidSortError,
    MapTreeError,
)
from .flattener import flatten_tree, walk_tree
from .keys import DEFAULT_KEYS, TreeKeys
from .sorting import (
    ByComparator,
    ByField,
    NoSort,
    SortSpec,
    compare_values,
    make_sort_spec,
    sort_forest,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Conversions
    "build_tree",
    "flatten_tree",
    "walk_tree",
    # Configuration
    "TreeKeys",
    "DEFAULT_KEYS",
    # Sorting
    "SortSpec",
    "NoSort",
    "ByField",
    "ByComparator",
    "compare_values",
    "make_sort_spec",
    "sort_forest",
    # Exceptions
    "MapTreeError",
    "InvalidKeyError",
    "InvalidSortError",
    "InvalidOrderError",
]
