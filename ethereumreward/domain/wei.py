from typing import Union

UINT256_MAX = 2**256 - 1


class WeiOverflowError(OverflowError):
    pass


class Wei(int):
    """Unsigned 256-bit amount of wei.

    Every arithmetic helper is checked: a result outside ``[0, 2**256 - 1]``
    raises ``WeiOverflowError`` instead of wrapping or clamping.
    Division floors, the same way the protocol shares rewards.
    """

    ZERO: "Wei"

    def __new__(cls, value: int = 0):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Wei requires an int, got {type(value).__name__}")
        if value < 0 or value > UINT256_MAX:
            raise WeiOverflowError(f"{value} is out of the uint256 range")
        return super().__new__(cls, value)

    @classmethod
    def of(cls, value: Union[int, str, None]) -> "Wei":
        if value is None:
            return cls.ZERO
        if isinstance(value, str):
            value = int(value, 16) if value.startswith("0x") else int(value)
        return cls(value)

    def add(self, other: int) -> "Wei":
        return Wei(int(self) + int(other))

    def multiply(self, other: int) -> "Wei":
        return Wei(int(self) * int(other))

    def divide(self, other: int) -> "Wei":
        if other == 0:
            raise ZeroDivisionError("divide Wei by zero")
        return Wei(int(self) // int(other))

    def to_hex(self) -> str:
        return hex(self)

    def __repr__(self):
        return f"Wei({int(self)})"


Wei.ZERO = Wei(0)
