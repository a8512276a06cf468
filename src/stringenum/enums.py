"""Enum base classes and a decorator for attaching string labels to members."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from stringenum.core import (
    LABEL_ATTR,
    MISSING,
    forget_index,
    is_enum_type,
    label_for,
    parse,
    parse_value,
)
from stringenum.exceptions import NotAnEnumError, StringEnumError, UnknownMemberError

logger = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=type[Enum])


class StringValue(BaseModel):
    """
    A string label for an enum member.

    Attributes:
        value: The label text. Any string is accepted, including "".

    Example:
        >>> class Color(LabelledEnum):
        ...     RED = 0, StringValue("red")
    """

    model_config = ConfigDict(frozen=True)

    value: str

    def __init__(self, value: str, /, **data: Any) -> None:
        super().__init__(value=value, **data)


def _coerce_label(label: "str | StringValue | None") -> str | None:
    if label is None or isinstance(label, str):
        return label
    if isinstance(label, StringValue):
        return label.value
    raise TypeError(f"Label must be a str or StringValue, got {type(label).__name__}")


class LabelledEnum(Enum):
    """
    Enum whose members may carry a string label.

    Declare a labelled member as ``NAME = value, "label"`` and an unlabelled
    one as ``NAME = value``. The member's value is the first element only.

    Example:
        >>> class Color(LabelledEnum):
        ...     RED = 0, "red"
        ...     GREEN = 1, "green"
        ...     BLUE = 2
        >>> Color.RED.value, Color.RED.label, Color.BLUE.label
        (0, 'red', None)
    """

    def __new__(cls, value: Any, label: "str | StringValue | None" = None):
        member_type = cls._member_type_
        if member_type is object:
            obj = object.__new__(cls)
        else:
            obj = member_type.__new__(cls, value)
        obj._value_ = value
        setattr(obj, LABEL_ATTR, _coerce_label(label))
        return obj

    @property
    def label(self) -> str | None:
        return label_for(self)

    @classmethod
    def from_label(cls, label: str, ignore_case: bool = False, *, default: Any = MISSING):
        """Find the member carrying ``label``. See :func:`stringenum.parse`."""
        return parse(cls, label, ignore_case, default=default)

    @classmethod
    def from_value(cls, value: int):
        """Find the member with integer value ``value``. See :func:`stringenum.parse_value`."""
        return parse_value(cls, value)


class LabelledIntEnum(int, LabelledEnum):
    """LabelledEnum whose members are also ints."""


class LabelledStrEnum(str, LabelledEnum):
    """LabelledEnum whose members are also strs."""

    def __str__(self) -> str:
        return str(self.value)


def string_values(**member_labels: "str | StringValue | None") -> Callable[[EnumT], EnumT]:
    """
    Class decorator attaching labels to the members of an existing enum.

    Keys are member names (aliases resolve to their canonical member).
    Passing None for a name removes that member's label.

    Raises:
        NotAnEnumError: If the decorated class is not an enum
        UnknownMemberError: If a key is not a member name
        StringEnumError: If a member and its alias are given different labels

    Example:
        >>> @string_values(RED="red", GREEN="green")
        ... class Color(Enum):
        ...     RED = 0
        ...     GREEN = 1
        ...     BLUE = 2
    """

    def decorate(enum_cls: EnumT) -> EnumT:
        if not is_enum_type(enum_cls):
            raise NotAnEnumError(enum_cls)

        assigned: dict[Enum, str | None] = {}
        for name, label in member_labels.items():
            try:
                member = enum_cls.__members__[name]
            except KeyError:
                raise UnknownMemberError(name, enum_cls) from None
            value = _coerce_label(label)
            if member in assigned and assigned[member] != value:
                raise StringEnumError(
                    f"{enum_cls.__name__}.{member.name} given conflicting labels "
                    f"{assigned[member]!r} and {value!r}"
                )
            assigned[member] = value

        for member, value in assigned.items():
            setattr(member, LABEL_ATTR, value)
        forget_index(enum_cls)

        logger.debug(f"Attached {len(assigned)} label(s) to {enum_cls.__name__}")
        return enum_cls

    return decorate
