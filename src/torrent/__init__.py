"""
Torrent metadata extraction on top of the bencode package.
"""
from .magnet import build_magnet_link, unique_trackers
from .metainfo import compute_info_hash, extract, load_torrent
from .models import TorrentFileEntry, TorrentMeta
from .summary import format_size, is_torrent_file, render_summary

__all__ = [
    "extract",
    "load_torrent",
    "compute_info_hash",
    "build_magnet_link",
    "unique_trackers",
    "TorrentMeta",
    "TorrentFileEntry",
    "format_size",
    "is_torrent_file",
    "render_summary",
]
