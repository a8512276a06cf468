"""Pytest configuration and fixtures for stringenum tests."""

from enum import Enum, IntFlag

import pytest

from stringenum import LabelledEnum, StringValue, string_values


class Color(LabelledEnum):
    RED = 0, "red"
    GREEN = 1, "green"
    BLUE = 2


@string_values(RED="red", GREEN="green")
class PlainColor(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


class Status(LabelledEnum):
    """Labelled, unlabelled and duplicate-labelled members interleaved."""

    ACTIVE = 1, StringValue("active")
    PENDING = 2
    SUSPENDED = 3, "Stopped"
    CLOSED = 4, "stopped"
    ARCHIVED = 5
    EMPTY = 6, ""


@string_values(R="read", W="write", X="exec", RW="read-write")
class Perm(IntFlag):
    R = 1
    W = 2
    X = 4
    RW = 3


@pytest.fixture(scope="session")
def color() -> type[Color]:
    """RED "red", GREEN "green", BLUE without a label."""
    return Color


@pytest.fixture(scope="session")
def plain_color() -> type[PlainColor]:
    """Same members as ``color``, labelled with the string_values decorator."""
    return PlainColor


@pytest.fixture(params=["labelled", "decorated"])
def any_color(request) -> type[Enum]:
    """Both colour enums, one per test run."""
    return Color if request.param == "labelled" else PlainColor


@pytest.fixture(scope="session")
def status() -> type[Status]:
    return Status


@pytest.fixture(scope="session")
def perm() -> type[Perm]:
    return Perm
