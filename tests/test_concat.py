import pytest

from inlinetext.concat import concat


def test_concat_joins_pieces_in_order():
    assert concat("line1\n", "line2\n", "line3", "line3b") == "line1\nline2\nline3line3b"


def test_concat_with_adjacent_literals_grouped():
    pieces = ("line1\n" "line2\n", "line3" "line3b")
    assert concat(*pieces) == "line1\nline2\nline3line3b"


def test_concat_keeps_embedded_newlines_and_spaces():
    result = concat("alpha ", "beta\n", "  gamma", "\tdelta\n")
    assert result == "alpha beta\n  gamma\tdelta\n"


def test_concat_empty_pieces_contribute_nothing():
    assert concat("", "x", "", "y", "") == "xy"


def test_concat_nothing_is_empty():
    assert concat() == ""


def test_concat_single():
    assert concat("alone") == "alone"


@pytest.mark.parametrize("bad", [1, 2.5, None, b"bytes"])
def test_concat_rejects_non_strings(bad):
    with pytest.raises(TypeError):
        concat("ok", bad)