"""Tests for environment-driven collection settings."""

import warnings

import pytest

from urlparts import Collection, DuplicateOffsetError, DuplicateOffsetHandling
from urlparts.config import CollectionSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any local .env file."""
    monkeypatch.delenv("URLPARTS_DUPLICATE_OFFSETS", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_to_warn():
    assert CollectionSettings().duplicate_handling() is DuplicateOffsetHandling.WARN


@pytest.mark.parametrize(
    ("name", "handling"),
    [
        ("last_wins", DuplicateOffsetHandling.LAST_WINS),
        ("warn", DuplicateOffsetHandling.WARN),
        ("error", DuplicateOffsetHandling.ERROR),
    ],
)
def test_explicit_values(name, handling):
    assert CollectionSettings(duplicate_offsets=name).duplicate_handling() is handling


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("URLPARTS_DUPLICATE_OFFSETS", "error")

    assert CollectionSettings().duplicate_handling() is DuplicateOffsetHandling.ERROR


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("URLPARTS_DUPLICATE_OFFSETS=last_wins\n", encoding="utf-8")

    assert CollectionSettings().duplicate_offsets == "last_wins"


def test_rejects_unknown_value():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        CollectionSettings(duplicate_offsets="first_wins")


def test_from_settings_applies_handling():
    settings = CollectionSettings(duplicate_offsets="error")

    with pytest.raises(DuplicateOffsetError):
        Collection.from_settings([("q", "x"), ("q", "y")], settings)


def test_from_settings_loads_environment(monkeypatch):
    monkeypatch.setenv("URLPARTS_DUPLICATE_OFFSETS", "last_wins")

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        params = Collection.from_settings([("q", "x"), ("q", "y")])

    assert params.to_mapping() == {"q": "y"}


def test_from_settings_passes_hooks():
    params = Collection.from_settings({"Q": "x"}, CollectionSettings(), offset_validator=str.upper)

    assert params.has_offset("q")


class KeywordCompatible(Collection[str]):
    __slots__ = ()


def test_from_settings_builds_subclass():
    params = KeywordCompatible.from_settings(
        [("q", "x"), ("q", "y")], CollectionSettings(duplicate_offsets="last_wins")
    )

    assert type(params) is KeywordCompatible
    assert params.to_mapping() == {"q": "y"}
    assert type(params.filter(lambda value: True)) is KeywordCompatible
