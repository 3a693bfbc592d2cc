"""
Safety limits applied while decoding untrusted Bencoded input.
"""
from pydantic import BaseModel, Field

MAX_DEPTH = 64
MAX_ENTRIES = 100_000
MAX_STRING_BYTES = 50 * 1024 * 1024   # 50 MiB


class DecoderLimits(BaseModel):
    """Bounds on nesting, container entries and byte-string size."""

    model_config = {"frozen": True}

    max_depth: int = Field(
        default=MAX_DEPTH,
        ge=1,
        description="Maximum value nesting depth (every value counts one level)",
    )
    max_entries: int = Field(
        default=MAX_ENTRIES,
        ge=1,
        description="Maximum list elements plus dict pairs across one decode",
    )
    max_string_bytes: int = Field(
        default=MAX_STRING_BYTES,
        ge=0,
        description="Maximum declared length of a single byte string",
    )


DEFAULT_LIMITS = DecoderLimits()
