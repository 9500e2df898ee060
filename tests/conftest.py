"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from collections.abc import Iterable

from urlparts import Collection, InvalidArgumentError


def fold_header_name(offset):
    """Case-fold header names; anything but a string is rejected."""
    if not isinstance(offset, str):
        raise InvalidArgumentError(f"Header names are strings, got {offset!r}")
    return offset.lower()


def make_headers(data) -> Collection[str]:
    """Composed owning type: folds names on every construction."""
    folded = {fold_header_name(name): value for name, value in Collection.validate_source(data).items()}
    return Collection(folded, factory=make_headers, offset_validator=fold_header_name)


class SegmentList(Collection[str]):
    """Subclassed owning type: positional segments, always re-indexed from 0."""

    __slots__ = ()

    def __init__(self, segments: Iterable[str] = ()):
        super().__init__(enumerate(segments))

    def validate_offset(self, offset):
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
            raise InvalidArgumentError(f"Segment offsets are non-negative integers, got {offset!r}")
        return offset

    def new_instance(self, data):
        return SegmentList(data.values())


@pytest.fixture
def abc_collection():
    """The reference scenario: [(0, "a"), (1, "b"), (2, "a")]."""
    return Collection([(0, "a"), (1, "b"), (2, "a")])


@pytest.fixture
def query_params():
    return Collection([("q", "python"), ("page", "2"), ("utm_source", "mail"), ("utm_medium", "email")])


@pytest.fixture
def headers():
    return make_headers({"Content-Type": "text/html", "X-Trace": "abc"})


@pytest.fixture
def segments():
    return SegmentList(["blog", "2024", "post"])


@pytest.fixture
def segment_list_cls():
    return SegmentList


@pytest.fixture
def headers_factory():
    return make_headers
