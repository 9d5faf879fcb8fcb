import enum
from typing import Union

from humanfriendly import InvalidSize, parse_size


class BlockSize(enum.IntEnum):
    KB1 = 1000
    KB4 = 4000
    KB64 = 64000
    KB100 = 100000
    KB512 = 512000
    MB1 = 1000000
    MB10 = 10000000
    MB100 = 100000000
    GB1 = 1000000000


def parse_block_size(value: Union[int, str, BlockSize]) -> int:
    if isinstance(value, str):
        value = value.strip()
        if value.upper() in BlockSize.__members__:
            size = BlockSize[value.upper()].value
        else:
            # "100KB" is decimal, "100KiB" binary
            try:
                size = parse_size(value)
            except InvalidSize as e:
                raise ValueError(str(e)) from e
    else:
        size = int(value)

    if size <= 0:
        raise ValueError(f"Block size must be positive, got {value!r}")

    return size
