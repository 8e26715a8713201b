# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Field key configuration shared by the tree builder and the flattener."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidKeyError

DEFAULT_ID_KEY = 'id'
DEFAULT_PARENT_KEY = 'parentId'
DEFAULT_CHILDREN_KEY = 'children'


@dataclass(frozen=True)
class TreeKeys:
    """Names of the record fields holding identity and hierarchy.

    A round trip through build_tree and flatten_tree is lossless only when
    both sides use the same TreeKeys.

    Attributes:
        id_key: Field holding the record identifier.
        parent_key: Field holding the parent identifier (flat form).
        children_key: Field holding the list of child records (tree form).

    Example:
        >>> keys = TreeKeys(children_key='rows')
        >>> keys.parent_key
        'parentId'
        >>> TreeKeys(parent_key='children')  # raises InvalidKeyError
    """

    id_key: str = DEFAULT_ID_KEY
    parent_key: str = DEFAULT_PARENT_KEY
    children_key: str = DEFAULT_CHILDREN_KEY

    def __post_init__(self) -> None:
        check_keys(
            id_key=self.id_key,
            parent_key=self.parent_key,
            children_key=self.children_key,
        )


def check_keys(**keys: str) -> None:
    """Check that the given field keys are non-empty and distinct.

    Only the keys passed are compared, so an operation that never reads a
    field does not constrain its name.

    Raises:
        InvalidKeyError: If a key is empty, not a string, or repeated.
    """
    for name, value in keys.items():
        if not isinstance(value, str) or not value:
            raise InvalidKeyError(
                f"{name} must be a non-empty string, not {value!r}"
            )
    if len(set(keys.values())) != len(keys):
        described = ', '.join(f"{name}={value!r}" for name, value in keys.items())
        raise InvalidKeyError(f"Field keys must be distinct: {described}")


DEFAULT_KEYS = TreeKeys()
