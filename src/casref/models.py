"""
Data models for casref.

ObjectType partitions the ID namespace. The pydantic models describe the
results returned by the operations layer and rendered by the CLI.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .ids import HEX_ID_LEN


class ObjectType(str, Enum):
    """Object categories. IDs never collide across categories."""
    DATA = "data"
    KEY = "key"
    LOCK = "lock"
    SNAPSHOT = "snapshot"
    INDEX = "index"


class Resolution(BaseModel):
    """A prefix resolved to exactly one object."""
    type: ObjectType = Field(..., description="Object type searched")
    prefix: str = Field(..., description="Prefix supplied by the user")
    id: str = Field(..., description="Full ID of the matching object")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v):
        if not v:
            raise ValueError("prefix must not be empty")
        return v


class PrefixReport(BaseModel):
    """Shortest unambiguous prefix length for one object type."""
    type: ObjectType = Field(..., description="Object type measured")
    prefix_length: int = Field(..., ge=1, le=HEX_ID_LEN, description="Shortest unique prefix length")
    min_length: int = Field(..., ge=1, description="Configured lower bound")


class HashResult(BaseModel):
    """ID computed for a local file."""
    path: str = Field(..., description="Hashed file path")
    size: int = Field(..., ge=0, description="File size in bytes")
    id: str = Field(..., description="Full ID of the content")
    algorithm: str = Field(default="sha256", description="Digest algorithm")


__all__ = ["ObjectType", "Resolution", "PrefixReport", "HashResult"]
