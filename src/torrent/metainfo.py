"""
Extraction of torrent metadata from raw .torrent bytes.

Only a non-dictionary root or a missing/invalid info dictionary aborts
extraction; every other missing or mistyped field falls back to a default.
"""
import hashlib
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from bencode import (
    BencodeDecodeError,
    BencodeDict,
    BencodeInt,
    BencodeList,
    BencodeString,
    DecoderLimits,
    decode_with_info_range,
)

from .magnet import build_magnet_link
from .models import TorrentFileEntry, TorrentMeta

logger = logging.getLogger(__name__)

PIECE_HASH_LEN = 20
UNKNOWN_NAME = "Unknown"
UNKNOWN_PATH = "unknown"


# ------------------ typed accessors ------------------

def get_text(d: BencodeDict, key: str, default: Optional[str] = None) -> Optional[str]:
    val = d.get(key)
    return val.text() if isinstance(val, BencodeString) else default


def get_bytes(d: BencodeDict, key: str, default: Optional[bytes] = None) -> Optional[bytes]:
    val = d.get(key)
    return val.value if isinstance(val, BencodeString) else default


def get_int(d: BencodeDict, key: str, default: Optional[int] = None) -> Optional[int]:
    val = d.get(key)
    return val.value if isinstance(val, BencodeInt) else default


def get_list(d: BencodeDict, key: str, default: Optional[BencodeList] = None) -> Optional[BencodeList]:
    val = d.get(key)
    return val if isinstance(val, BencodeList) else default


def get_dict(d: BencodeDict, key: str, default: Optional[BencodeDict] = None) -> Optional[BencodeDict]:
    val = d.get(key)
    return val if isinstance(val, BencodeDict) else default


# ------------------ field parsers ------------------

def parse_tracker_tiers(announce_list: Optional[BencodeList]) -> List[List[str]]:
    """announce-list -> tiers of tracker URLs; empty tiers and non-string entries are dropped."""
    if announce_list is None:
        return []

    tiers = []
    for tier in announce_list:
        if not isinstance(tier, BencodeList):
            continue
        urls = [u.text() for u in tier if isinstance(u, BencodeString)]
        if urls:
            tiers.append(urls)
    return tiers


def build_file_path(path: Optional[BencodeList]) -> str:
    if path is None:
        return UNKNOWN_PATH
    return "/".join(p.text() for p in path if isinstance(p, BencodeString))


def parse_files(files: BencodeList) -> List[TorrentFileEntry]:
    entries = []
    for entry in files:
        if not isinstance(entry, BencodeDict):
            continue
        entries.append(TorrentFileEntry(
            path=build_file_path(get_list(entry, "path")),
            length=max(get_int(entry, "length", 0), 0),
        ))
    return entries


def compute_info_hash(data: bytes, info_range: Optional[Tuple[int, int]]) -> Optional[str]:
    """SHA-1 over the exact original bytes of the info value, as lowercase hex."""
    if info_range is None:
        return None
    start, end = info_range
    if start < 0 or end <= start or end > len(data):
        return None
    return hashlib.sha1(data[start:end]).hexdigest()


# ------------------ entry points ------------------

def extract(data: bytes, limits: Optional[DecoderLimits] = None) -> TorrentMeta:
    """
    Decodes a complete .torrent buffer and returns its metadata.
    Raises BencodeDecodeError if the buffer cannot be read as a torrent.
    """
    root, info_range = decode_with_info_range(data, limits)
    if not isinstance(root, BencodeDict):
        raise BencodeDecodeError("Root element is not a dictionary")

    # ------------------ TOP LEVEL ------------------
    announce = get_text(root, "announce")
    created_by = get_text(root, "created by")
    comment = get_text(root, "comment")
    creation_date = get_int(root, "creation date")
    tiers = parse_tracker_tiers(get_list(root, "announce-list"))

    # ------------------ INFO ------------------
    info = get_dict(root, "info")
    if info is None:
        raise BencodeDecodeError("Missing or invalid 'info' dictionary")

    name = get_text(info, "name", UNKNOWN_NAME)
    piece_length = max(get_int(info, "piece length", 0), 0)
    pieces = get_bytes(info, "pieces", b"")
    private_flag = get_int(info, "private", 0) == 1

    # ------------------ FILES ------------------
    files_list = get_list(info, "files")
    if files_list is not None:
        files = parse_files(files_list)
        total_size = sum(f.length for f in files)
    else:
        total_size = max(get_int(info, "length", 0), 0)
        files = [TorrentFileEntry(path=name, length=total_size)]

    # ------------------ HASH / MAGNET ------------------
    info_hash_hex = compute_info_hash(data, info_range)
    magnet_link = build_magnet_link(info_hash_hex, name, announce, tiers)

    meta = TorrentMeta(
        name=name,
        multi_file=files_list is not None,
        total_size=total_size,
        files=files,
        announce=announce,
        tracker_tiers=tiers,
        created_by=created_by,
        comment=comment,
        creation_date=creation_date,
        private_flag=private_flag,
        piece_length=piece_length,
        piece_count=len(pieces) // PIECE_HASH_LEN,
        info_hash_hex=info_hash_hex,
        magnet_link=magnet_link,
    )
    logger.debug(
        "Extracted torrent %r: %d file(s), info hash %s",
        meta.name, meta.file_count, meta.info_hash_hex,
    )
    return meta


def load_torrent(path: Union[str, Path], limits: Optional[DecoderLimits] = None) -> TorrentMeta:
    """Reads a whole .torrent file into memory and extracts it."""
    raw = Path(path).read_bytes()
    return extract(raw, limits)
