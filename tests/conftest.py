import pytest

from bencode import encode


def make_torrent(info=None, **top) -> bytes:
    """
    Builds .torrent bytes. Top-level keywords use '_' for spaces
    (created_by -> "created by").
    """
    root = {k.replace("_", " "): v for k, v in top.items()}
    if info is not None:
        root["info"] = info
    return encode(root)


@pytest.fixture
def build_torrent():
    return make_torrent


@pytest.fixture
def single_file_info():
    return {
        "name": "hello.txt",
        "length": 12_345,
        "piece length": 524_288,
        "pieces": b"\x00" * 20,
    }
