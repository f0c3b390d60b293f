import pytest

from arithkit.split import split


@pytest.mark.parametrize(
    "text, sep, expected",
    [
        ("a/b/c", "/", ["a", "b", "c"]),
        ("a/b/c", ",", ["a/b/c"]),
        ("abc", "/", ["abc"]),
        ("a/b/c/", "/", ["a", "b", "c", ""]),
        ("a::b::c", "::", ["a", "b", "c"]),
        ("", "/", [""]),
    ],
)
def test_split(text, sep, expected):
    assert split(text, sep) == expected


def test_split_rejoins_to_original():
    text = "x--y----z--"
    assert "--".join(split(text, "--")) == text


def test_split_empty_separator():
    with pytest.raises(ValueError):
        split("abc", "")