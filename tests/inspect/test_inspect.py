import pytest

from phpbcrypt.inspect.bcrypt import BcryptHashInfo, inspect_bcrypt_hash


@pytest.mark.parametrize(
    ("hash", "expected"),
    [
        (
            "$2a$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW",
            BcryptHashInfo(
                prefix="2a",
                rounds=12,
                salt="R9h/cIPz0gi.URNNX3kh2O",
                hash="PST9/PgBkqquzi.Ss7KIUgO2t0jWMUW",
            ),
        ),
        (
            "$2y$05$/OK.fbVrR/bpIqNJ5ianF.Sa7shbm4.OzKpvFnX1pQLmQW96oUlCq",
            BcryptHashInfo(
                prefix="2y",
                rounds=5,
                salt="/OK.fbVrR/bpIqNJ5ianF.",
                hash="Sa7shbm4.OzKpvFnX1pQLmQW96oUlCq",
            ),
        ),
    ],
)
def test_bcrypt_inspect(hash: str, expected: BcryptHashInfo) -> None:
    info = inspect_bcrypt_hash(hash)
    assert info == expected
    assert info.as_str() == hash
    assert info.body == hash[7:]


@pytest.mark.parametrize(
    "hash",
    [
        "",
        "$2y$10$",
        "$2y$10$tooshort",
        # unknown version tag
        "$2c$10$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "$2x$10$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        # character outside of bcrypt64 alphabet
        "$2y$10$abcdefghijklmnopqrstuv!wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "$2y$10$abcdefghijklmnopqrstuv+wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        # body one character too long / short
        "$2y$10$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZa",
        "$2y$10$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXY",
        # rounds field
        "$2y$AB$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "$2y$8$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "$2y$03$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "$2y$32$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        # trailing newline must not be accepted
        "$2y$10$abcdefghijklmnopqrstuv.wxyzABCDEFGHIJKLMNOPQRSTUVWXYZ\n",
    ],
)
def test_bcrypt_inspect_invalid(hash: str) -> None:
    assert inspect_bcrypt_hash(hash) is None


def test_as_str_pads_rounds() -> None:
    info = BcryptHashInfo(prefix="2b", rounds=4, salt="a" * 22, hash="b" * 31)
    assert info.as_str() == "$2b$04$" + "a" * 22 + "b" * 31
