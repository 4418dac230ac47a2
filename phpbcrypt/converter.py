"""conversion of PHP ``$2y$`` bcrypt hashes to the ``$2b$`` format.

PHP's ``password_hash()`` tags its bcrypt output with ``2y``, the identifier
crypt_blowfish introduced after CVE-2011-2483. The digest is identical to the
OpenBSD ``2b`` variant, but many bcrypt implementations only accept ``2a`` /
``2b``, so the tag needs rewriting before the hash can be verified there.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import TypedDict, Unpack

from phpbcrypt._utils.bytes import as_str
from phpbcrypt._utils.validation import (
    rounds_in_range,
    validate_bool,
    validate_int,
    validate_rounds,
)
from phpbcrypt.errors import (
    INVALID_FORMAT_MESSAGE,
    INVALID_ROUNDS_MESSAGE,
    InvalidHashError,
)
from phpbcrypt.inspect.bcrypt import BcryptHashInfo, inspect_bcrypt_hash

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_ROUNDS",
    "ConversionOptions",
    "ConversionResult",
    "ConversionSettings",
    "PhpBcryptConverter",
    "convert",
    "get_rounds",
    "is_valid_hash",
    "needs_conversion",
]

DEFAULT_ROUNDS = 10

# version tags rewritten on conversion; anything else passes through
_VERSION_MAP = {"2y": "2b"}


class ConversionOptions(TypedDict, total=False):
    rounds: int
    strict: bool


@dataclasses.dataclass(frozen=True)
class ConversionSettings:
    """
    :param rounds:
        reported when a hash can't be parsed, by non-strict failures
        and :meth:`PhpBcryptConverter.get_rounds`.
        never overrides rounds read from a valid hash, and is not range checked
        here; :class:`PhpBcryptConverter` checks its own default.
    :param strict:
        raise :exc:`InvalidHashError` on invalid input,
        instead of returning a failed result.
    """

    rounds: int = DEFAULT_ROUNDS
    strict: bool = True

    def __post_init__(self) -> None:
        validate_int(self.rounds, "rounds")
        validate_bool(self.strict, "strict")

    def merge(self, options: Mapping[str, Any] | None) -> ConversionSettings:
        if not options:
            return self
        return dataclasses.replace(self, **options)


@dataclasses.dataclass(frozen=True)
class ConversionResult:
    hash: str
    rounds: int
    success: bool
    error: Optional[str] = None


def _coerce(hash: Any) -> str | None:
    if isinstance(hash, bytes):
        try:
            return as_str(hash)
        except UnicodeDecodeError:
            return None
    if isinstance(hash, str):
        return hash
    return None


class PhpBcryptConverter:
    def __init__(
        self,
        rounds: int = DEFAULT_ROUNDS,
        strict: bool = True,
    ) -> None:
        validate_rounds(rounds)
        self._settings = ConversionSettings(rounds=rounds, strict=strict)

    @property
    def settings(self) -> ConversionSettings:
        return self._settings

    def inspect(self, hash: Any) -> BcryptHashInfo | None:
        candidate = _coerce(hash)
        if candidate is None:
            return None
        return inspect_bcrypt_hash(candidate)

    def is_valid_hash(self, hash: Any) -> bool:
        return self.inspect(hash) is not None

    def get_rounds(self, hash: Any) -> int:
        """
        Best-effort read of the rounds field, without validating the rest of the hash.

        Falls back to the configured default rounds
        when the field is missing or not two digits.
        """
        candidate = _coerce(hash)
        if candidate is None:
            return self._settings.rounds

        parts = candidate.split("$")
        if len(parts) < 3:
            return self._settings.rounds

        field = parts[2]
        if len(field) != 2 or not (field.isascii() and field.isdigit()):
            return self._settings.rounds
        return int(field)

    def needs_conversion(self, hash: Any) -> bool:
        """Checks if hash is valid and its version tag would be rewritten."""
        info = self.inspect(hash)
        return info is not None and info.prefix in _VERSION_MAP

    def convert(
        self,
        hash: Any,
        options: ConversionOptions | None = None,
        **overrides: Unpack[ConversionOptions],
    ) -> ConversionResult:
        """
        :param hash: PHP bcrypt hash, as str or ascii bytes
        :param options: per-call settings, merged over the converter's settings
        :raises InvalidHashError: if hash is invalid and strict mode is enabled
        :return: converted hash, with ``2y`` rewritten to ``2b``
        """
        settings = self._settings.merge(options).merge(overrides)

        if not self.is_valid_hash(hash):
            return self._fail(INVALID_FORMAT_MESSAGE, settings)

        candidate = as_str(hash)
        try:
            _, version, rounds_field, body = candidate.split("$")
            rounds = int(rounds_field)
        except ValueError:
            return self._fail(INVALID_FORMAT_MESSAGE, settings)

        # unreachable while the grammar check range-checks rounds;
        # kept as a guard on the value actually used for reassembly
        if not rounds_in_range(rounds):
            return self._fail(INVALID_ROUNDS_MESSAGE, settings)

        target = _VERSION_MAP.get(version, version)
        converted = f"${target}${rounds:02}${body}"
        log.debug(
            "converted bcrypt hash $%s$ -> $%s$ (rounds=%d)", version, target, rounds
        )
        return ConversionResult(hash=converted, rounds=rounds, success=True)

    def _fail(self, message: str, settings: ConversionSettings) -> ConversionResult:
        log.debug(
            "bcrypt hash conversion failed: %s (strict=%r)", message, settings.strict
        )
        if settings.strict:
            raise InvalidHashError(message)
        return ConversionResult(
            hash="",
            rounds=settings.rounds,
            success=False,
            error=message,
        )


_default_converter = PhpBcryptConverter()

convert = _default_converter.convert
is_valid_hash = _default_converter.is_valid_hash
get_rounds = _default_converter.get_rounds
needs_conversion = _default_converter.needs_conversion
