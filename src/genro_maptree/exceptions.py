# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MapTree exceptions.

Only caller-programming errors are raised. Malformed records (missing or
dangling parent ids, absent children) are handled permissively and never
raise.
"""

from __future__ import annotations


class MapTreeError(Exception):
    """Base exception for MapTree errors."""

    pass


class InvalidKeyError(MapTreeError, ValueError):
    """Raised when a field key is empty, not a string, or collides with another key."""

    pass


class InvalidSortError(MapTreeError, TypeError):
    """Raised when a sort argument is neither a field name nor a comparator."""

    pass


class InvalidOrderError(MapTreeError, ValueError):
    """Raised when a sort order is not 'asc' or 'desc'."""

    pass
