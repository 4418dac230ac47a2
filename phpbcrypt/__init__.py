"""phpbcrypt - rewrite PHP bcrypt hashes for other bcrypt implementations"""

from phpbcrypt.converter import (
    DEFAULT_ROUNDS,
    ConversionOptions,
    ConversionResult,
    ConversionSettings,
    PhpBcryptConverter,
    convert,
    get_rounds,
    is_valid_hash,
    needs_conversion,
)
from phpbcrypt.errors import InvalidHashError
from phpbcrypt.inspect.bcrypt import BcryptHashInfo, inspect_bcrypt_hash

__version__ = "1.2.1"

__all__ = [
    "DEFAULT_ROUNDS",
    "BcryptHashInfo",
    "ConversionOptions",
    "ConversionResult",
    "ConversionSettings",
    "InvalidHashError",
    "PhpBcryptConverter",
    "convert",
    "get_rounds",
    "inspect_bcrypt_hash",
    "is_valid_hash",
    "needs_conversion",
]
