BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


def rounds_in_range(
    rounds: int, min: int = BCRYPT_MIN_ROUNDS, max: int = BCRYPT_MAX_ROUNDS
) -> bool:
    return min <= rounds <= max


def validate_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)


def validate_bool(value: object, name: str) -> None:
    if not isinstance(value, bool):
        msg = f"{name} must be a bool, got {type(value).__name__}"
        raise TypeError(msg)


def validate_rounds(
    rounds: int, min: int = BCRYPT_MIN_ROUNDS, max: int = BCRYPT_MAX_ROUNDS
) -> None:
    validate_int(rounds, "rounds")
    if not rounds_in_range(rounds, min, max):
        msg = f"rounds must be between {min} - {max}"
        raise ValueError(msg)
