import pytest

from dir_info.quantity import BlockSize, parse_block_size


@pytest.mark.parametrize("value,expected", (
    (512, 512),
    (BlockSize.KB100, 100000),
    ("100KB", 100000),
    (" 100 KB ", 100000),
    ("100KiB", 102400),
    ("1MiB", 1048576),
    ("4096", 4096),
    ("kb4", 4000),
    ("MB1", 1000000),
))
def test_parse_block_size(value, expected):
    assert parse_block_size(value) == expected


@pytest.mark.parametrize("value", (
    0,
    -1,
    "0",
    "0KB",
    "lots",
    "",
))
def test_parse_block_size_invalid(value):
    with pytest.raises(ValueError):
        parse_block_size(value)
