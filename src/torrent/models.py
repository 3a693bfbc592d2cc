"""
Pydantic models for extracted torrent metadata.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from .magnet import unique_trackers


class TorrentFileEntry(BaseModel):
    """One file of a torrent; path segments are joined with '/'."""

    model_config = {"frozen": True}

    path: str = Field(..., description="File path relative to the torrent root")
    length: int = Field(..., ge=0, description="File length in bytes")


class TorrentMeta(BaseModel):
    """Metadata extracted from a .torrent file."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Display name (info.name)")
    multi_file: bool = Field(default=False, description="True when info.files is present")
    total_size: int = Field(..., ge=0, description="Sum of all file lengths in bytes")
    files: List[TorrentFileEntry] = Field(
        default_factory=list,
        description="File entries; single-file torrents have exactly one",
    )

    announce: Optional[str] = Field(None, description="Primary tracker URL")
    tracker_tiers: List[List[str]] = Field(
        default_factory=list,
        description="Tracker tiers from announce-list (empty if absent)",
    )
    created_by: Optional[str] = Field(None, description="Creator application")
    comment: Optional[str] = Field(None, description="Torrent comment")
    creation_date: Optional[int] = Field(None, description="Unix epoch seconds")

    private_flag: bool = Field(default=False, description="info.private == 1")
    piece_length: int = Field(default=0, ge=0, description="Piece length in bytes")
    piece_count: int = Field(default=0, ge=0, description="len(info.pieces) // 20")

    info_hash_hex: Optional[str] = Field(
        None,
        min_length=40,
        max_length=40,
        pattern=r"^[0-9a-f]{40}$",
        description="SHA-1 of the raw info dictionary bytes, lowercase hex",
    )
    magnet_link: Optional[str] = Field(None, description="Magnet URI (present iff info_hash_hex is)")

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def trackers(self) -> List[str]:
        """Deduplicated announce + tier trackers in first-seen order."""
        return unique_trackers(self.announce, self.tracker_tiers)
