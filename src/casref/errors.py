"""
casref error classes.

Prefix resolution has two recoverable outcomes besides success, and callers
render different guidance for each, so they are distinct types. Errors
raised by listing providers or byte sources are not wrapped here: they
propagate to the caller unmodified.
"""
from __future__ import annotations


class CasRefError(Exception):
    """Base class for all casref errors."""
    pass


class PrefixNotFound(CasRefError):
    """
    No object of the requested type has an ID starting with the prefix.

    Recoverable: ask the user for a different prefix.
    """
    pass


class AmbiguousPrefix(CasRefError):
    """
    Two or more objects of the requested type share the prefix.

    Recoverable: ask the user for a longer prefix.
    """
    pass


class ClosedResourceAccess(CasRefError, ValueError):
    """
    Read attempted on a BlobReader whose source was already released.

    Raised when:
    - read() is called after close()
    - read() is called after end-of-data released the source

    This is a caller bug, never a transient condition.
    """
    pass


__all__ = [
    "CasRefError",
    "PrefixNotFound",
    "AmbiguousPrefix",
    "ClosedResourceAccess",
]
