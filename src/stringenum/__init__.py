"""stringenum: string labels for enum members."""

from .config import LabelFieldOptions, UnlabelledFallback
from .core import MISSING, is_enum_type, label_for, labels, parse, parse_value, try_parse
from .exceptions import (
    LabelNotFoundError,
    NotAnEnumError,
    StringEnumError,
    UndefinedValueError,
    UnknownMemberError,
)
from .fields import by_label
from .enums import LabelledEnum, LabelledIntEnum, LabelledStrEnum, StringValue, string_values

__all__ = [
    # Labels
    "LabelledEnum",
    "LabelledIntEnum",
    "LabelledStrEnum",
    "StringValue",
    "string_values",
    # Lookups
    "label_for",
    "labels",
    "parse",
    "try_parse",
    "parse_value",
    "is_enum_type",
    "MISSING",
    # Pydantic
    "by_label",
    "LabelFieldOptions",
    "UnlabelledFallback",
    # Errors
    "StringEnumError",
    "NotAnEnumError",
    "UndefinedValueError",
    "LabelNotFoundError",
    "UnknownMemberError",
]
