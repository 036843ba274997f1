"""
Prefix resolution for casref.

Implements find() and prefix_length(): resolving a short, user-supplied ID
prefix to the one full ID it names, and computing how many characters are
needed for every ID of a type to stay distinguishable. Both scan a Listing
from the store and always cancel it before returning.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .errors import AmbiguousPrefix, PrefixNotFound
from .ids import HEX_ID_LEN
from .models import ObjectType
from .storage.base import Lister

__all__ = ["MIN_PREFIX_LENGTH", "find", "find_snapshot", "prefix_length"]

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 8


def _prefix_matches(prefix: str, name: str) -> bool:
    # A name shorter than the prefix is compared on its own length only.
    n = min(len(prefix), len(name))
    return prefix[:n] == name[:n]


def find(lister: Lister, object_type: ObjectType, prefix: str) -> str:
    """
    Find the single ID of object_type that starts with prefix.

    The whole listing is scanned linearly. Scanning stops as soon as a
    second distinct match is seen.

    IDs are listed in their canonical lowercase hex form, so the prefix is
    lowercased before comparing and matching ignores the case the user typed.

    Args:
        lister: Source of ID listings
        object_type: Category to search
        prefix: Non-empty leading part of an ID

    Returns:
        The full matching ID string

    Raises:
        ValueError: If prefix is empty
        PrefixNotFound: If no ID starts with prefix
        AmbiguousPrefix: If more than one ID starts with prefix
    """
    if not prefix:
        raise ValueError("prefix must not be empty")
    object_type = ObjectType(object_type)
    prefix = prefix.lower()

    match: Optional[str] = None

    # TODO: sort the listing once and bisect when callers resolve many prefixes
    with lister.list(object_type) as names:
        for name in names:
            if not _prefix_matches(prefix, name):
                continue
            if match is None:
                match = name
            elif name != match:
                logger.debug(f"Prefix {prefix} is ambiguous for {object_type.value}: {match}, {name}")
                raise AmbiguousPrefix(f"multiple {object_type.value} IDs with prefix {prefix!r} found")

    if match is None:
        raise PrefixNotFound(f"no {object_type.value} ID with prefix {prefix!r} found")

    logger.debug(f"Resolved {object_type.value} prefix {prefix} to {match}")
    return match


def find_snapshot(lister: Lister, prefix: str) -> str:
    """Resolve prefix to a snapshot ID."""
    return find(lister, ObjectType.SNAPSHOT, prefix)


def prefix_length(
    lister: Lister,
    object_type: ObjectType,
    min_length: int = MIN_PREFIX_LENGTH,
) -> int:
    """
    Return the number of characters needed so that all IDs of object_type
    remain distinguishable, but never fewer than min_length.

    Each candidate length is checked by truncating every name and comparing
    it with the previous truncated name in listing order. Only neighbours
    are compared, so the result is exact only when the listing yields IDs
    sharing a prefix next to each other (e.g. sorted).

    Args:
        lister: Source of ID listings
        object_type: Category to measure
        min_length: Smallest length ever returned

    Returns:
        Length in [min_length, HEX_ID_LEN], or HEX_ID_LEN if min_length is
        not below it
    """
    object_type = ObjectType(object_type)
    with lister.list(object_type) as names:
        ids: List[str] = list(names)

    logger.debug(f"Computing prefix length over {len(ids)} {object_type.value} IDs")

    for length in range(min_length, HEX_ID_LEN):
        last: Optional[str] = None
        for name in ids:
            current = name[:length]
            if current == last:
                break
            last = current
        else:
            return length

    return HEX_ID_LEN
