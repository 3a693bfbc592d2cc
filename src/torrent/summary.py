"""
Plain-text rendering of TorrentMeta for terminal display.
"""
from datetime import datetime
from pathlib import Path
from typing import List, Union

from .models import TorrentMeta

TORRENT_EXTENSIONS = {"torrent"}
MAX_FILES_DISPLAY = 500
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def is_torrent_file(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower().lstrip(".") in TORRENT_EXTENSIONS


def format_size(n: int) -> str:
    """Human readable size in 1024 steps (B, KB, MB, GB, TB)."""
    if n < 0:
        return "Unknown"
    if n < 1024:
        return f"{n} B"
    kb = n / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    mb = kb / 1024
    if mb < 1024:
        return f"{mb:.1f} MB"
    gb = mb / 1024
    if gb < 1024:
        return f"{gb:.2f} GB"
    return f"{gb / 1024:.2f} TB"


def _section(lines: List[str], title: str):
    if lines:
        lines.append("")
    lines.append(f"== {title} ==")


def _row(lines: List[str], label: str, value):
    lines.append(f"  {label:<13} {value}")


def render_summary(meta: TorrentMeta, max_files: int = MAX_FILES_DISPLAY) -> str:
    lines = []

    _section(lines, "Summary")
    _row(lines, "Name", meta.name)
    _row(lines, "Mode", "Multi-file" if meta.multi_file else "Single-file")
    _row(lines, "Total size", format_size(meta.total_size))
    if meta.multi_file:
        _row(lines, "File count", meta.file_count)
    _row(lines, "Piece length", format_size(meta.piece_length))
    _row(lines, "Pieces", meta.piece_count)
    if meta.private_flag:
        _row(lines, "Private", "Yes")

    if meta.created_by is not None or meta.creation_date is not None or meta.comment is not None:
        _section(lines, "Metadata")
        if meta.created_by is not None:
            _row(lines, "Created by", meta.created_by)
        if meta.creation_date is not None:
            _row(lines, "Created", _format_date(meta.creation_date))
        if meta.comment is not None:
            _row(lines, "Comment", meta.comment)

    if meta.info_hash_hex is not None:
        _section(lines, "Info Hash")
        lines.append(f"  {meta.info_hash_hex}")

    if meta.magnet_link is not None:
        _section(lines, "Magnet Link")
        lines.append(f"  {meta.magnet_link}")

    trackers = meta.trackers
    if trackers:
        _section(lines, f"Trackers ({len(trackers)})")
        if meta.tracker_tiers:
            for num, tier in enumerate(meta.tracker_tiers, start=1):
                lines.append(f"  Tier {num}")
                lines.extend(f"    {url}" for url in tier)
        else:
            lines.append(f"  {meta.announce}")

    _section(lines, f"Files ({meta.file_count}, {format_size(meta.total_size)})")
    for entry in meta.files[:max_files]:
        lines.append(f"  {format_size(entry.length):>10}  {entry.path}")
    if meta.file_count > max_files:
        lines.append(f"  ... (list truncated to {max_files} entries)")

    return "\n".join(lines)


def _format_date(epoch: int) -> str:
    try:
        return datetime.fromtimestamp(epoch).strftime(DATE_FORMAT)
    except (OverflowError, OSError, ValueError):
        return str(epoch)
