"""
Data structures for representing Bencoded types.
"""
__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "decode_text",
]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def decode_text(raw: bytes) -> str:
    """
    Decodes a byte string meant for humans (names, paths, trackers).
    Strict UTF-8 first; bytes that are not valid UTF-8 are read as Latin-1,
    which maps every byte to exactly one character and cannot fail.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


class BencodeType:
    """Base class for all Bencode data types."""
    value = None

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.value == other.value

    __hash__ = None


class BencodeInt(BencodeType):
    """Represents a Bencoded integer (signed 64-bit)."""
    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("BencodeInt out of signed 64-bit range.")
        self.value = value

    def __repr__(self):
        return f"BencodeInt({self.value})"


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("BencodeString requires bytes.")
        self.value = bytes(value)

    def text(self) -> str:
        return decode_text(self.value)

    def __len__(self):
        return len(self.value)

    def __repr__(self):
        return f"BencodeString({self.value!r})"


class BencodeList(BencodeType):
    """Represents a Bencoded list."""
    def __init__(self, value: list):
        if not isinstance(value, list):
            raise TypeError("BencodeList requires a list.")
        self.value = value

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def __repr__(self):
        return f"BencodeList({self.value!r})"


class BencodeDict(BencodeType):
    """
    Represents a Bencoded dictionary.
    Keys are the text of the bencoded key bytes; insertion order is kept.
    """
    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        for k in value.keys():
            if not isinstance(k, str):
                raise TypeError("BencodeDict keys must be str.")
        self.value = value

    def get(self, key: str, default=None):
        return self.value.get(key, default)

    def __contains__(self, key):
        return key in self.value

    def __len__(self):
        return len(self.value)

    def __repr__(self):
        return f"BencodeDict({self.value!r})"
