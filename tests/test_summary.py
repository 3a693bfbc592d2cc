import pytest

from torrent import TorrentFileEntry, TorrentMeta, format_size, is_torrent_file, render_summary


@pytest.mark.parametrize("size, expected", [
    (-1, "Unknown"),
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.0 KB"),
    (1536, "1.5 KB"),
    (1024 ** 2, "1.0 MB"),
    (1024 ** 3, "1.00 GB"),
    (5 * 1024 ** 4, "5.00 TB"),
])
def test_format_size(size, expected):
    assert format_size(size) == expected


@pytest.mark.parametrize("path, expected", [
    ("a.torrent", True),
    ("A.TORRENT", True),
    ("dir/x.torrent", True),
    ("a.txt", False),
    ("torrent", False),
])
def test_is_torrent_file(path, expected):
    assert is_torrent_file(path) is expected


def _meta(**kwargs):
    fields = {
        "name": "Album",
        "multi_file": True,
        "total_size": 3072,
        "files": [
            TorrentFileEntry(path="a.flac", length=1024),
            TorrentFileEntry(path="b.flac", length=2048),
        ],
        "piece_length": 16384,
        "piece_count": 1,
    }
    fields.update(kwargs)
    return TorrentMeta(**fields)


def test_render_summary_sections():
    meta = _meta(
        announce="http://a/announce",
        tracker_tiers=[["http://a/announce"], ["http://b/announce"]],
        created_by="mktorrent",
        info_hash_hex="ab" * 20,
        magnet_link="magnet:?xt=urn:btih:" + "ab" * 20,
        private_flag=True,
    )

    text = render_summary(meta)
    print(text)

    assert "Album" in text
    assert "Multi-file" in text
    assert "3.0 KB" in text
    assert "== Metadata ==" in text
    assert "mktorrent" in text
    assert "ab" * 20 in text
    assert "== Trackers (2) ==" in text
    assert "Tier 2" in text
    assert "Private" in text
    assert "b.flac" in text


def test_render_summary_skips_empty_sections():
    text = render_summary(_meta(multi_file=False))
    assert "Single-file" in text
    assert "Metadata" not in text
    assert "Info Hash" not in text
    assert "Trackers" not in text


def test_render_summary_announce_without_tiers():
    text = render_summary(_meta(announce="http://only/announce"))
    assert "== Trackers (1) ==" in text
    assert "http://only/announce" in text


def test_render_summary_truncates_file_list():
    text = render_summary(_meta(), max_files=1)
    assert "a.flac" in text
    assert "b.flac" not in text
    assert "truncated to 1 entries" in text
