import pytest
from pydantic import ValidationError

from tinyts.config.settings import CheckerSettings, load_settings
from tinyts.core.levels import Level


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path) -> None:
    for key in ("TINYTS_LEVEL", "TINYTS_RECURSION_LIMIT", "TINYTS_SHOW_TERM"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = CheckerSettings()
    assert settings.level is Level.OBJ
    assert settings.recursion_limit == 10000
    assert settings.show_term is True


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TINYTS_LEVEL", "batch")
    monkeypatch.setenv("TINYTS_SHOW_TERM", "false")
    settings = load_settings()
    assert settings.level is Level.BATCH
    assert settings.show_term is False


def test_explicit_override_wins(monkeypatch) -> None:
    monkeypatch.setenv("TINYTS_LEVEL", "batch")
    assert load_settings(level=Level.ARITH).level is Level.ARITH


def test_none_override_ignored(monkeypatch) -> None:
    monkeypatch.setenv("TINYTS_LEVEL", "basic")
    assert load_settings(level=None).level is Level.BASIC


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("TINYTS_RECURSION_LIMIT=20000\n", encoding="utf-8")
    assert load_settings().recursion_limit == 20000


def test_recursion_limit_floor(monkeypatch) -> None:
    monkeypatch.setenv("TINYTS_RECURSION_LIMIT", "10")
    with pytest.raises(ValidationError):
        load_settings()


def test_unknown_level(monkeypatch) -> None:
    monkeypatch.setenv("TINYTS_LEVEL", "generics")
    with pytest.raises(ValidationError):
        load_settings()
