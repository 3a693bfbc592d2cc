"""
Magnet URI construction from an info hash, display name and trackers.
"""
import urllib.parse
from typing import List, Optional, Sequence

MAGNET_PREFIX = "magnet:?xt=urn:btih:"


def unique_trackers(announce: Optional[str], tiers: Sequence[Sequence[str]]) -> List[str]:
    """
    announce followed by every tier's trackers, duplicates collapsed,
    first occurrence deciding the order.
    """
    seen = {}
    if announce is not None:
        seen[announce] = None
    for tier in tiers:
        for url in tier:
            seen.setdefault(url, None)
    return list(seen)


def build_magnet_link(
    info_hash_hex: Optional[str],
    name: Optional[str],
    announce: Optional[str] = None,
    tiers: Sequence[Sequence[str]] = (),
) -> Optional[str]:
    """
    magnet:?xt=urn:btih:<hash>&dn=<name>&tr=<tracker>...
    Returns None without an info hash. Values are form-encoded (space -> '+',
    '*' kept literal).
    """
    if not info_hash_hex:
        return None

    parts = [MAGNET_PREFIX + info_hash_hex]
    if name is not None:
        parts.append("dn=" + urllib.parse.quote_plus(name, safe="*"))
    for tracker in unique_trackers(announce, tiers):
        parts.append("tr=" + urllib.parse.quote_plus(tracker, safe="*"))

    return "&".join(parts)
