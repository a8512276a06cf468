"""Configuration models for stringenum's pydantic integration."""

from pydantic import BaseModel, ConfigDict

from stringenum.compat import StrEnum


class UnlabelledFallback(StrEnum):
    """What to serialize for a member that has no label."""

    NAME = "name"  # Member name, e.g. "BLUE"
    VALUE = "value"  # Member value, e.g. 2
    NONE = "none"  # null


class LabelFieldOptions(BaseModel):
    """
    Options for fields declared with :func:`stringenum.by_label`.

    Attributes:
        ignore_case: Match incoming labels case-insensitively
        accept_values: Also accept member values and member names on input
        unlabelled: How members without a label are serialized
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_case: bool = False
    accept_values: bool = True
    unlabelled: UnlabelledFallback = UnlabelledFallback.NAME
