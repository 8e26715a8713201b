# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sibling ordering for trees produced by build_tree.

A sort specification is one of three variants:

- NoSort: keep the order in which nodes were attached
- ByField(name): compare nodes on a record field (see compare_values)
- ByComparator(func): use a two-argument comparator as given

build_tree accepts the raw forms (None, a field name, a callable) and turns
them into a variant with make_sort_spec.

Example:
    >>> spec = make_sort_spec('ord')
    >>> spec
    ByField(field='ord')
    >>> roots = [{'ord': 20, 'children': []}, {'ord': 10, 'children': []}]
    >>> sort_forest(roots, spec.comparator(), 'children')
    >>> [n['ord'] for n in roots]
    [10, 20]
"""

from __future__ import annotations

import locale
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Literal

from .exceptions import InvalidOrderError, InvalidSortError

Comparator = Callable[[dict[str, Any], dict[str, Any]], int]
SortOrder = Literal['asc', 'desc']

SORT_ORDERS = ('asc', 'desc')


class SortSpec(ABC):
    """Base class of the sort specification variants."""

    @abstractmethod
    def comparator(self) -> Comparator | None:
        """Return the comparator for this spec, or None when no sorting applies."""


@dataclass(frozen=True)
class NoSort(SortSpec):
    """Keep sibling order as attached."""

    def comparator(self) -> Comparator | None:
        return None


@dataclass(frozen=True)
class ByField(SortSpec):
    """Order siblings by the value of a record field."""

    field: str

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field:
            raise InvalidSortError(
                f"Sort field must be a non-empty string, not {self.field!r}"
            )

    def comparator(self) -> Comparator | None:
        field = self.field
        return lambda a, b: compare_values(a.get(field), b.get(field))


@dataclass(frozen=True)
class ByComparator(SortSpec):
    """Order siblings with a caller-supplied comparator, used verbatim."""

    func: Comparator

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise InvalidSortError(
                f"Comparator must be callable, not {type(self.func).__name__}"
            )

    def comparator(self) -> Comparator | None:
        return self.func


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison of two field values.

    Rules, in order:
        - None sorts before any other value; two Nones are equal.
        - Two real numbers (int, float, Decimal, Fraction) compare
          arithmetically; bool is not a number here, and numbers that
          refuse ordering (Decimal NaN) fall through to the next rule.
        - Anything else compares the str() forms with locale collation,
          or by code point when the strings cannot be collated (NUL).

    Args:
        a: Left value.
        b: Right value.

    Returns:
        Negative, zero or positive, like a classic cmp function.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    if _is_number(a) and _is_number(b):
        try:
            return (a > b) - (a < b)
        except (TypeError, ArithmeticError):
            # Decimal NaN refuses ordering; compare as text below
            pass
    a_str, b_str = str(a), str(b)
    try:
        return locale.strcoll(a_str, b_str)
    except ValueError:
        return (a_str > b_str) - (a_str < b_str)


def make_sort_spec(sort: SortSpec | str | Comparator | None) -> SortSpec:
    """Turn a sort argument into a SortSpec variant.

    Args:
        sort: None, a field name, a comparator callable, or a SortSpec.

    Returns:
        The matching SortSpec.

    Raises:
        InvalidSortError: If sort is none of the accepted forms.
    """
    if sort is None:
        return NoSort()
    if isinstance(sort, SortSpec):
        return sort
    if isinstance(sort, str):
        return ByField(sort)
    if callable(sort):
        return ByComparator(sort)
    raise InvalidSortError(
        f"sort must be None, a field name or a comparator, not {type(sort).__name__}"
    )


def validate_order(order: str) -> SortOrder:
    """Check that order is 'asc' or 'desc' and return it."""
    if order not in SORT_ORDERS:
        raise InvalidOrderError(f"order must be 'asc' or 'desc', not {order!r}")
    return order


def sort_forest(
    roots: list[dict[str, Any]],
    comparator: Comparator,
    children_key: str,
    order: SortOrder = 'asc',
) -> None:
    """Sort every sibling group of a forest in place.

    The roots are sorted first, then each node's children, depth-first.
    Empty children lists are skipped. Sorting is stable, so ties keep their
    attach order.

    Args:
        roots: Root nodes, each holding a children list under children_key.
        comparator: Three-way comparator over two nodes.
        children_key: Field holding the children list.
        order: 'asc' or 'desc'; 'desc' negates the comparator.
    """
    validate_order(order)
    if order == 'desc':
        key = cmp_to_key(lambda a, b: -comparator(a, b))
    else:
        key = cmp_to_key(comparator)

    stack = [roots]
    while stack:
        siblings = stack.pop()
        siblings.sort(key=key)
        for node in reversed(siblings):
            children = node.get(children_key)
            if children:
                stack.append(children)
