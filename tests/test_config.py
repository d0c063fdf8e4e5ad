"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from cafechronicles.core.config import Settings


def test_default_day_timezone_is_utc() -> None:
    assert Settings().STAMP_DAY_TIMEZONE == "UTC"


def test_accepts_iana_timezone() -> None:
    assert Settings(STAMP_DAY_TIMEZONE="Asia/Singapore").STAMP_DAY_TIMEZONE == "Asia/Singapore"


@pytest.mark.parametrize("name", ["Asia/Singapur", "Not/A_Zone", "../etc/passwd"])
def test_rejects_unknown_timezone(name: str) -> None:
    with pytest.raises(ValidationError, match="Unknown IANA timezone"):
        Settings(STAMP_DAY_TIMEZONE=name)


def test_rejects_unknown_timezone_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STAMP_DAY_TIMEZONE", "Europe/Atlantis")
    with pytest.raises(ValidationError):
        Settings()
