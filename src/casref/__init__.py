"""
casref: short ID prefixes for content-addressed object stores.

Resolves user-supplied prefixes to full object IDs, computes the shortest
unambiguous prefix length per object type, and provides bounded readers
over stored objects.
"""
from .errors import AmbiguousPrefix, CasRefError, ClosedResourceAccess, PrefixNotFound
from .ids import HEX_ID_LEN, ID_SIZE, ObjectID, digest_for, hash_data, sha256_digest
from .models import ObjectType
from .resolve import MIN_PREFIX_LENGTH, find, find_snapshot, prefix_length
from .storage import BlobReader, Lister, Listing, LocalObjectStore, limit_reader, release

__version__ = "0.1.0"

__all__ = [
    "AmbiguousPrefix",
    "CasRefError",
    "ClosedResourceAccess",
    "PrefixNotFound",
    "HEX_ID_LEN",
    "ID_SIZE",
    "ObjectID",
    "digest_for",
    "hash_data",
    "sha256_digest",
    "ObjectType",
    "MIN_PREFIX_LENGTH",
    "find",
    "find_snapshot",
    "prefix_length",
    "BlobReader",
    "Lister",
    "Listing",
    "LocalObjectStore",
    "limit_reader",
    "release",
]
