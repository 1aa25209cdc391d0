import pytest

from pwkit.configtext import (
    parse_fixed_msg,
    parse_item_color,
    parse_item_desc,
    parse_item_ext_desc,
    parse_item_ext_prop,
)


def test_item_color_pairs_and_partial_lines():
    text = "1\t2\n3\t\n\t4\n"
    assert parse_item_color(text) == {1: 2, 3: 0, 0: 4}


def test_item_color_accepts_gbk_bytes_and_crlf():
    data = "10\t5\r\n11\t6\r\n".encode("gbk")
    assert parse_item_color(data) == {10: 5, 11: 6}


def test_item_color_line_without_tab_uses_zero():
    assert parse_item_color("7\n") == {7: 0}


def test_item_color_empty_text():
    assert parse_item_color("") == {}


def test_item_desc_skips_header_comments_and_nuls():
    text = 'header\n"first"\n#comment\n/other\n\n"sec\0ond"\n'
    assert parse_item_desc(text) == ["first", "second"]


def test_item_desc_takes_first_non_empty_part():
    text = 'header\n12 "text"\n'
    assert parse_item_desc(text) == ["12 "]


def test_item_desc_from_utf16_bytes():
    data = 'header\n"alpha"\n"beta"\n'.encode("utf-16-le")
    assert parse_item_desc(data) == ["alpha", "beta"]


def test_item_ext_desc_maps_ids():
    text = 'header\n100 "some text"\n0 "ignored"\n#c\n200\n'
    assert parse_item_ext_desc(text) == {100: "some text", 200: ""}


def test_item_ext_desc_ignores_non_numeric_ids():
    text = 'header\nabc "x"\n-5 "y"\n'
    assert parse_item_ext_desc(text) == {}


def test_item_ext_desc_first_line_is_header():
    text = '1 "not read"\n2 "read"\n'
    assert parse_item_ext_desc(text) == {2: "read"}


def test_item_ext_prop_block():
    text = "type: 5\n{\n1, 2,\n 3 \n}\ntype:7\n{\n4\n}\n"
    assert parse_item_ext_prop(text) == {"1": 5, "2": 5, "3": 5, "4": 7}


def test_item_ext_prop_without_opening_brace_is_ignored():
    text = "type: 5\n1, 2\n}\n"
    assert parse_item_ext_prop(text) == {}


def test_item_ext_prop_unterminated_block_raises():
    with pytest.raises(ValueError):
        parse_item_ext_prop("type: 3\n{\n1, 2\n")


def test_item_ext_prop_later_type_overrides():
    text = "type: 1\n{\n9\n}\ntype: 2\n{\n9\n}\n"
    assert parse_item_ext_prop(text.encode("gbk")) == {"9": 2}


def test_fixed_msg_matches_item_desc_rules():
    text = 'header\n"hello"\n#skip\n"world"\n'
    assert parse_fixed_msg(text) == parse_item_desc(text)
    assert parse_fixed_msg(text) == ["hello", "world"]


def test_fixed_msg_skips_line_of_only_quotes():
    assert parse_fixed_msg('header\n""\n"ok"\n') == ["ok"]