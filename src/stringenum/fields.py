"""Pydantic field types that read and write enum members as their labels."""

import logging
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from stringenum.config import LabelFieldOptions, UnlabelledFallback
from stringenum.core import is_enum_type, label_for, try_parse
from stringenum.exceptions import NotAnEnumError

logger = logging.getLogger(__name__)


def by_label(
    enum_cls: type[Enum], options: LabelFieldOptions | None = None, **overrides: Any
) -> Any:
    """
    Build a pydantic field type for ``enum_cls`` that uses member labels.

    Strings are parsed by label on input and members are written out as their
    label. Remaining input falls through to pydantic's own enum validation
    when ``accept_values`` is set.

    Args:
        enum_cls: The enumeration the field holds
        options: Field options (default: LabelFieldOptions())
        **overrides: Individual option overrides, e.g. ``ignore_case=True``

    Returns:
        An ``Annotated`` type to use as a field annotation

    Raises:
        NotAnEnumError: If ``enum_cls`` is not an enumeration

    Example:
        >>> class Paint(BaseModel):
        ...     color: by_label(Color, ignore_case=True)
        >>> Paint(color="RED").model_dump()
        {'color': 'red'}
    """
    if not is_enum_type(enum_cls):
        raise NotAnEnumError(enum_cls)

    opts = options or LabelFieldOptions()
    if overrides:
        opts = LabelFieldOptions.model_validate({**opts.model_dump(), **overrides})

    def validate(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, str):
            member = try_parse(enum_cls, value, ignore_case=opts.ignore_case)
            if member is not None:
                return member
            if opts.accept_values:
                if value in enum_cls.__members__:
                    return enum_cls[value]
                return value
        elif opts.accept_values:
            return value
        raise ValueError(f"{value!r} is not a label of {enum_cls.__name__}")

    def serialize(member: Enum) -> Any:
        label = label_for(member)
        if label is not None:
            return label
        match opts.unlabelled:
            case UnlabelledFallback.NAME:
                return member.name
            case UnlabelledFallback.VALUE:
                return member.value
            case _:
                return None

    logger.debug(f"Created label field for {enum_cls.__name__} with {opts!r}")
    return Annotated[enum_cls, BeforeValidator(validate), PlainSerializer(serialize)]
