"""Storage protocols and backends for casref."""
from .base import ByteSource, Lister, Listing, ObjectStore
from .blob_reader import BlobReader, limit_reader, release
from .local import LocalObjectStore

__all__ = [
    "ByteSource",
    "Lister",
    "Listing",
    "ObjectStore",
    "BlobReader",
    "limit_reader",
    "release",
    "LocalObjectStore",
]
