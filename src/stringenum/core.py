"""Lookups between enum members, their string labels and their integer values."""

import logging
from enum import Enum
from typing import Any, NamedTuple, TypeVar

from stringenum.exceptions import LabelNotFoundError, NotAnEnumError, UndefinedValueError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Attribute holding a member's label
LABEL_ATTR = "__string_value__"

# Class attribute holding the lookup index built for that class
INDEX_ATTR = "__string_value_index__"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Sentinel for "no default supplied"
MISSING: Any = _Missing()


class _EnumIndex(NamedTuple):
    members: tuple[Enum, ...]
    labelled: tuple[tuple[Enum, str], ...]
    exact: dict[str, Enum]
    folded: dict[str, Enum]


def is_enum_type(obj: Any) -> bool:
    """Return True if ``obj`` is an enumeration class."""
    return isinstance(obj, type) and issubclass(obj, Enum)


def _require_enum(enum_cls: Any) -> None:
    if not is_enum_type(enum_cls):
        raise NotAnEnumError(enum_cls)


def fold_case(text: str) -> str:
    """
    Upper-case ``text`` one code point at a time.

    Characters whose upper-case form is longer than one code point are kept
    as they are, so "ß" never equals "SS".
    """
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in text)


def _enum_index(enum_cls: type[Enum]) -> _EnumIndex:
    """
    Get the lookup index for an enum class, building it on first use.

    The index is stored on the class itself, so it lives exactly as long as
    the class does. It is read from the class __dict__ only, never inherited.

    Members are taken from ``__members__`` in declaration order with aliases
    collapsed onto their canonical member, so named flag combinations are
    included. Only the first member carrying a given label is indexed.
    """
    index = enum_cls.__dict__.get(INDEX_ATTR)
    if index is not None:
        return index

    members: list[Enum] = []
    for member in enum_cls.__members__.values():
        if member not in members:
            members.append(member)

    labelled: list[tuple[Enum, str]] = []
    exact: dict[str, Enum] = {}
    folded: dict[str, Enum] = {}
    for member in members:
        label = getattr(member, LABEL_ATTR, None)
        if label is None:
            continue
        labelled.append((member, label))
        if label in exact:
            logger.debug(
                f"Label {label!r} on {enum_cls.__name__}.{member.name} is shadowed by "
                f"{enum_cls.__name__}.{exact[label].name}"
            )
        exact.setdefault(label, member)
        folded.setdefault(fold_case(label), member)

    logger.debug(
        f"Indexed {enum_cls.__name__}: {len(members)} member(s), {len(labelled)} labelled"
    )
    index = _EnumIndex(tuple(members), tuple(labelled), exact, folded)
    setattr(enum_cls, INDEX_ATTR, index)
    return index


def forget_index(enum_cls: type[Enum]) -> None:
    """Drop the cached lookup index of ``enum_cls`` so the next lookup rebuilds it."""
    if INDEX_ATTR in enum_cls.__dict__:
        delattr(enum_cls, INDEX_ATTR)


def label_for(member: Enum) -> str | None:
    """
    Get the string label attached to an enum member.

    Args:
        member: Any enum member

    Returns:
        The attached label, or None if the member has no label. Flag
        combinations that are not declared members have no label.

    Raises:
        NotAnEnumError: If ``member`` is not an enum member

    Example:
        >>> label_for(Color.RED)
        'red'
    """
    if not isinstance(member, Enum):
        raise NotAnEnumError(type(member))
    return getattr(member, LABEL_ATTR, None)


def labels(enum_cls: type[E]) -> dict[E, str]:
    """Map every labelled member of ``enum_cls`` to its label, in declaration order."""
    _require_enum(enum_cls)
    return dict(_enum_index(enum_cls).labelled)  # type: ignore[arg-type]


def parse(
    enum_cls: type[E],
    string_value: str,
    ignore_case: bool = False,
    *,
    default: Any = MISSING,
) -> E:
    """
    Find the member of ``enum_cls`` whose label equals ``string_value``.

    Members are scanned in declaration order and the first match wins.
    Members without a label never match.

    Args:
        enum_cls: The enumeration to search
        string_value: The label to look for
        ignore_case: Compare labels case-insensitively, per code point
        default: Returned instead of raising when nothing matches

    Returns:
        The matching member, or ``default`` when given and nothing matches

    Raises:
        NotAnEnumError: If ``enum_cls`` is not an enumeration
        TypeError: If ``string_value`` is not a str
        LabelNotFoundError: If nothing matches and no default was given

    Example:
        >>> parse(Color, "RED", ignore_case=True)
        <Color.RED: 0>
    """
    _require_enum(enum_cls)
    if not isinstance(string_value, str):
        raise TypeError(f"Label must be a str, got {type(string_value).__name__}")

    index = _enum_index(enum_cls)
    if ignore_case:
        member = index.folded.get(fold_case(string_value))
    else:
        member = index.exact.get(string_value)
    if member is not None:
        return member  # type: ignore[return-value]

    if default is not MISSING:
        logger.debug(f"No {enum_cls.__name__} member labelled {string_value!r}, using default")
        return default
    raise LabelNotFoundError(string_value, enum_cls, ignore_case)


def try_parse(enum_cls: type[E], string_value: str, ignore_case: bool = False) -> E | None:
    """Like :func:`parse`, but return None when no member matches."""
    return parse(enum_cls, string_value, ignore_case, default=None)


def parse_value(enum_cls: type[E], int_value: int) -> E:
    """
    Convert an integer into the declared member of ``enum_cls`` with that value.

    Raises:
        NotAnEnumError: If ``enum_cls`` is not an enumeration
        TypeError: If ``int_value`` is not an int
        UndefinedValueError: If no declared member has that value
    """
    _require_enum(enum_cls)
    if not isinstance(int_value, int) or isinstance(int_value, bool):
        raise TypeError(f"Value must be an int, got {type(int_value).__name__}")

    for member in _enum_index(enum_cls).members:
        if isinstance(member.value, int) and member.value == int_value:
            return member  # type: ignore[return-value]
    raise UndefinedValueError(int_value, enum_cls)
