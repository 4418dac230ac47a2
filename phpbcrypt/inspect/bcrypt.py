from __future__ import annotations

import dataclasses
import re

from phpbcrypt._utils.validation import rounds_in_range

__all__ = [
    "BCRYPT_HASH_REGEX",
    "BcryptHashInfo",
    "inspect_bcrypt_hash",
]

BCRYPT_HASH_REGEX = re.compile(
    r"\$(?P<prefix>2[aby])\$(?P<rounds>[0-9]{2})\$"
    r"(?P<salt>[./A-Za-z0-9]{22})(?P<hash>[./A-Za-z0-9]{31})"
)


@dataclasses.dataclass(frozen=True)
class BcryptHashInfo:
    prefix: str
    rounds: int
    salt: str
    hash: str

    @property
    def body(self) -> str:
        return f"{self.salt}{self.hash}"

    def as_str(self) -> str:
        return f"${self.prefix}${self.rounds:02}${self.body}"


def inspect_bcrypt_hash(hash: str) -> BcryptHashInfo | None:
    """
    Parses a ``$2a$`` / ``$2b$`` / ``$2y$`` bcrypt hash.

    Returns None unless the whole string matches and rounds are within 4-31.
    """
    result = BCRYPT_HASH_REGEX.fullmatch(hash)
    if not result:
        return None

    rounds = int(result.group("rounds"))
    if not rounds_in_range(rounds):
        return None

    return BcryptHashInfo(
        prefix=result.group("prefix"),
        rounds=rounds,
        salt=result.group("salt"),
        hash=result.group("hash"),
    )
