"""Validation helpers."""

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)
