"""
Bencode decoder for BitTorrent metainfo.

Decodes untrusted input with bounded depth, entry count and string size, and
records the raw byte range of the root dictionary's "info" value so callers
can hash the exact original bytes.
"""
import logging
import re
from typing import Optional, Tuple

from .limits import DEFAULT_LIMITS, DecoderLimits
from .structure import (
    INT64_MAX,
    INT64_MIN,
    BencodeDict,
    BencodeInt,
    BencodeList,
    BencodeString,
    BencodeType,
)

logger = logging.getLogger(__name__)

_INT_RE = re.compile(rb"-?[0-9]+")
_LENGTH_RE = re.compile(rb"[0-9]+")
_INT64_DIGITS = len(str(INT64_MAX))

INFO_KEY = "info"


class BencodeDecodeError(Exception):
    """Raised for malformed Bencode input and for invalid torrent structure."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is not None:
            return f"{self.message} (at byte {self.position})"
        return self.message


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode values.
    One instance per decode; the cursor and counters are not shared.
    """
    def __init__(self, data: bytes, limits: Optional[DecoderLimits] = None):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeDecoder requires a bytes-like buffer.")
        self.data = bytes(data)
        self.limits = limits or DEFAULT_LIMITS
        self.i = 0  # cursor index
        self.depth = 0
        self.entries = 0
        self.info_start = -1
        self.info_end = -1

    @property
    def info_range(self) -> Optional[Tuple[int, int]]:
        """(start, end) of the root "info" value, or None if it was not seen."""
        if self.info_start < 0 or self.info_end < 0:
            return None
        return self.info_start, self.info_end

    def decode(self) -> BencodeType:
        """Decodes one top-level value. Trailing bytes are left uninspected."""
        try:
            return self._parse_value()
        except BencodeDecodeError as exc:
            logger.debug("Bencode decode failed: %s", exc)
            raise

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _fail(self, message: str, position: Optional[int] = None):
        raise BencodeDecodeError(message, self.i if position is None else position)

    def _at_end(self) -> bool:
        return self.i >= len(self.data)

    def _peek(self) -> bytes:
        if self._at_end():
            self._fail("Unexpected end of data")
        return self.data[self.i:self.i+1]

    def _count_entry(self):
        self.entries += 1
        if self.entries > self.limits.max_entries:
            self._fail(f"Max entry count {self.limits.max_entries} exceeded")

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self) -> BencodeType:
        ch = self._peek()

        self.depth += 1
        try:
            if self.depth > self.limits.max_depth:
                self._fail(f"Max nesting depth {self.limits.max_depth} exceeded")

            if ch == b'i':
                return self._parse_int()

            if ch.isdigit():  # Bencode strings start with their length
                return self._parse_string()

            if ch == b'l':
                return self._parse_list()

            if ch == b'd':
                return self._parse_dict(is_root=self.depth == 1)

            self._fail(f"Invalid bencode token 0x{ch[0]:02x}")
        finally:
            self.depth -= 1

    def _parse_int(self) -> BencodeInt:
        """Parses an integer: i<digits>e."""
        start = self.i
        self.i += 1  # skip 'i'

        end_pos = self.data.find(b'e', self.i)
        if end_pos < 0:
            self._fail("Unterminated integer", start)

        number_bytes = self.data[self.i:end_pos]
        if not _INT_RE.fullmatch(number_bytes):
            self._fail(f"Invalid integer: {number_bytes[:32]!r}", start)

        # at most 19 significant digits fit in a signed 64-bit integer
        if len(number_bytes.lstrip(b"-").lstrip(b"0")) > _INT64_DIGITS:
            self._fail("Integer out of signed 64-bit range", start)

        try:
            num = int(number_bytes)
        except ValueError as exc:
            raise BencodeDecodeError("Invalid integer format", start) from exc

        if not INT64_MIN <= num <= INT64_MAX:
            self._fail("Integer out of signed 64-bit range", start)

        self.i = end_pos + 1  # skip 'e'
        return BencodeInt(num)

    def _read_string_bytes(self) -> bytes:
        """Reads <length>:<bytes> and returns the raw bytes."""
        start = self.i
        colon = self.data.find(b':', self.i)
        if colon < 0:
            self._fail("Missing ':' in byte string", start)

        length_bytes = self.data[self.i:colon]
        if not _LENGTH_RE.fullmatch(length_bytes):
            self._fail(f"Invalid string length: {length_bytes[:32]!r}", start)

        if len(length_bytes.lstrip(b"0")) > len(str(self.limits.max_string_bytes)):
            self._fail("String length out of bounds", start)

        try:
            length = int(length_bytes)
        except ValueError as exc:
            raise BencodeDecodeError("Invalid string length", start) from exc

        if length > self.limits.max_string_bytes:
            self._fail(f"String length out of bounds: {length}", start)

        self.i = colon + 1
        if self.i + length > len(self.data):
            self._fail(f"String data truncated (need {length} bytes)")

        string_bytes = self.data[self.i:self.i+length]
        self.i += length
        return string_bytes

    def _parse_string(self) -> BencodeString:
        """Parses a byte string from the Bencoded data."""
        return BencodeString(self._read_string_bytes())

    def _parse_list(self) -> BencodeList:
        """Parses a list: l<values>e."""
        self.i += 1  # skip 'l'
        items = []

        while not self._at_end() and self.data[self.i] != ord('e'):
            self._count_entry()
            items.append(self._parse_value())

        if self._at_end():
            self._fail("Unterminated list")
        self.i += 1  # skip 'e'
        return BencodeList(items)

    def _parse_dict(self, is_root: bool) -> BencodeDict:
        """Parses a dictionary: d<key value pairs>e. Keys are not required to be sorted."""
        self.i += 1  # skip 'd'
        obj = {}

        while not self._at_end() and self.data[self.i] != ord('e'):
            self._count_entry()
            key = self._read_string_bytes().decode("utf-8", errors="replace")

            value_start = self.i
            value = self._parse_value()
            if is_root and key == INFO_KEY:
                # duplicates: the range follows the value that ends up stored
                self.info_start = value_start
                self.info_end = self.i
            obj[key] = value

        if self._at_end():
            self._fail("Unterminated dictionary")
        self.i += 1  # skip 'e'
        return BencodeDict(obj)


def decode(data: bytes, limits: Optional[DecoderLimits] = None) -> BencodeType:
    """
    Convenience function to decode Bencoded data.
    """
    return BencodeDecoder(data, limits).decode()


def decode_with_info_range(
    data: bytes, limits: Optional[DecoderLimits] = None
) -> Tuple[BencodeType, Optional[Tuple[int, int]]]:
    """
    Decodes Bencoded data and returns the root value together with the
    (start, end) byte range of the root dictionary's "info" value, if any.
    """
    decoder = BencodeDecoder(data, limits)
    root = decoder.decode()
    return root, decoder.info_range
