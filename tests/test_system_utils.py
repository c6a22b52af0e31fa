import pytest

from sgu.utils import SystemUtils


@pytest.mark.parametrize(
    "size, expected",
    [
        ("15000000000", "15 gb"),
        ("1000000000", "1 gb"),
        ("999999999", "999 mb"),
        ("52428800", "52 mb"),
        ("0", "0 mb"),
        ("abc", "0 b"),
        ("", "0 b"),
        (None, "0 b"),
        (" 12", "0 b"),
        ("1" * 5000, "0 b"),
    ],
)
def test_format_size(size, expected):
    assert SystemUtils.format_size(size) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("440", 440), ("-1", -1), ("+7", 7), ("1_000", None), ("٣", None), ("", None), ("4.0", None), ("9" * 5000, None)],
)
def test_parse_int_is_strict(text, expected):
    assert SystemUtils.parse_int(text) == expected


@pytest.mark.parametrize("answer, expected", [("y", True), ("Y", True), ("y\n", True), ("yes", False), ("n", False), ("", False)])
def test_confirm_only_accepts_y(answer, expected):
    assert SystemUtils.confirm("uninstall? [y/n]: ", lambda prompt: answer) is expected


def test_confirm_end_of_input_is_no():
    def closed(prompt):
        raise EOFError

    assert SystemUtils.confirm("uninstall? [y/n]: ", closed) is False
