from torrent.magnet import build_magnet_link, unique_trackers

HASH = "0123456789abcdef0123456789abcdef01234567"


def test_no_hash_no_link():
    assert build_magnet_link(None, "name", "http://a/announce") is None
    assert build_magnet_link("", "name") is None


def test_hash_only():
    assert build_magnet_link(HASH, None) == f"magnet:?xt=urn:btih:{HASH}"


def test_name_and_trackers_are_form_encoded():
    link = build_magnet_link(HASH, "a b&c", "udp://t.example:80/announce")
    assert link == (
        f"magnet:?xt=urn:btih:{HASH}"
        "&dn=a+b%26c"
        "&tr=udp%3A%2F%2Ft.example%3A80%2Fannounce"
    )


def test_unique_trackers_order_and_dedup():
    tiers = [["b", "a"], ["c", "b"], []]
    assert unique_trackers("a", tiers) == ["a", "b", "c"]
    assert unique_trackers(None, tiers) == ["b", "a", "c"]
    assert unique_trackers(None, []) == []


def test_one_tr_per_unique_tracker():
    link = build_magnet_link(HASH, "n", "a", [["a", "b"], ["b"]])
    assert link.count("&tr=") == 2


def test_asterisk_left_literal():
    link = build_magnet_link(HASH, "a*b c")
    assert link.endswith("&dn=a*b+c")
