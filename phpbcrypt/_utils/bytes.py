from __future__ import annotations

from typing import Union

StrOrBytes = Union[str, bytes]


def as_str(value: StrOrBytes) -> str:
    """
    decode hash input to ``str``.

    hashes are pure ascii, so bytes outside that range raise :exc:`UnicodeDecodeError`.
    """
    return value.decode("ascii") if isinstance(value, bytes) else value
