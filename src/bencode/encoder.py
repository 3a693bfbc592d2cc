"""
Bencode encoder.

Only used to build fixtures and check round-trips; torrent extraction never
re-encodes anything (the info hash is taken over the original bytes).
"""
from typing import List

from .structure import BencodeType


def encode(obj) -> bytes:
    """Encodes Python primitives (int, str, bytes, list, dict) or Bencode values."""
    out: List[bytes] = []
    _encode_into(obj, out)
    return b"".join(out)


def _key_bytes(key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise TypeError(f"Dictionary keys must be str or bytes, not {type(key)}")


def _encode_into(obj, out: List[bytes]):
    if isinstance(obj, BencodeType):
        obj = obj.value

    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool")

    if isinstance(obj, int):
        out.append(b"i%de" % obj)
    elif isinstance(obj, (str, bytes, bytearray)):
        raw = obj.encode("utf-8") if isinstance(obj, str) else bytes(obj)
        out.append(b"%d:" % len(raw))
        out.append(raw)
    elif isinstance(obj, (list, tuple)):
        out.append(b"l")
        for item in obj:
            _encode_into(item, out)
        out.append(b"e")
    elif isinstance(obj, dict):
        # keys are written in raw-byte order
        out.append(b"d")
        pairs = [(_key_bytes(k), v) for k, v in obj.items()]
        for raw_key, value in sorted(pairs, key=lambda kv: kv[0]):
            _encode_into(raw_key, out)
            _encode_into(value, out)
        out.append(b"e")
    else:
        raise TypeError(f"Cannot bencode object of type {type(obj)}")
