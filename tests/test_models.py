import pytest
from pydantic import ValidationError

from bencode import DEFAULT_LIMITS, DecoderLimits
from torrent import TorrentFileEntry, TorrentMeta


def test_default_limits():
    assert DEFAULT_LIMITS.max_depth == 64
    assert DEFAULT_LIMITS.max_entries == 100_000
    assert DEFAULT_LIMITS.max_string_bytes == 50 * 1024 * 1024


@pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"max_entries": 0}, {"max_string_bytes": -1}])
def test_invalid_limits(kwargs):
    with pytest.raises(ValidationError):
        DecoderLimits(**kwargs)


def test_limits_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_LIMITS.max_depth = 1


def test_file_entry_rejects_negative_length():
    with pytest.raises(ValidationError):
        TorrentFileEntry(path="a", length=-1)


def test_meta_rejects_bad_info_hash():
    with pytest.raises(ValidationError):
        TorrentMeta(name="x", total_size=0, info_hash_hex="ABC")


def test_meta_is_frozen():
    meta = TorrentMeta(name="x", total_size=0)
    with pytest.raises(ValidationError):
        meta.name = "y"


def test_meta_properties():
    meta = TorrentMeta(
        name="x",
        total_size=1,
        files=[TorrentFileEntry(path="x", length=1)],
        announce="a",
        tracker_tiers=[["a", "b"]],
    )
    assert meta.file_count == 1
    assert meta.trackers == ["a", "b"]
