"""Exceptions raised by stringenum lookups."""

from typing import Any


class StringEnumError(Exception):
    pass


class NotAnEnumError(StringEnumError, TypeError):
    """The supplied type is not an enumeration."""

    def __init__(self, enum_type: Any):
        self.enum_type = enum_type
        super().__init__(f"Supplied type must be an Enum. Type was {enum_type!r}")


class UndefinedValueError(StringEnumError, ValueError):
    """An integer does not correspond to any declared member."""

    def __init__(self, value: Any, enum_type: type):
        self.value = value
        self.enum_type = enum_type
        super().__init__(
            f"Error - {value} is not an underlying value of the {enum_type.__name__} enumeration."
        )


class LabelNotFoundError(StringEnumError, LookupError):
    """No member of the enumeration carries the requested label."""

    def __init__(self, label: str, enum_type: type, ignore_case: bool = False):
        self.label = label
        self.enum_type = enum_type
        self.ignore_case = ignore_case
        mode = "case-insensitive" if ignore_case else "case-sensitive"
        super().__init__(f"No member of {enum_type.__name__} has the label {label!r} ({mode})")


class UnknownMemberError(StringEnumError, KeyError):
    def __init__(self, name: str, enum_type: type):
        self.name = name
        self.enum_type = enum_type
        super().__init__(f"{enum_type.__name__} has no member named {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])
