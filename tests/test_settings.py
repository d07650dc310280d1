import pytest
from pydantic import ValidationError

from pepito_gist.config.settings import AppSettings, get_github_token, get_settings
from pepito_gist.exceptions import ConfigurationError


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "abc")
    monkeypatch.setenv("PEPITO_GIST_TIMEOUT", "2.5")
    monkeypatch.setenv("PEPITO_GIST_LOG_LEVEL", "DEBUG")
    s = AppSettings()
    assert s.github_token == "abc"
    assert s.timeout == 2.5
    assert s.log_level == "DEBUG"


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for var in ("GITHUB_TOKEN", "PEPITO_GIST_TIMEOUT", "PEPITO_GIST_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = AppSettings()
    assert s.github_token is None
    assert s.timeout is None
    assert s.log_level == "WARNING"


def test_token_from_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    (tmp_path / ".env").write_text("GITHUB_TOKEN=from-dotenv\nOTHER=1\n", encoding="utf-8")
    assert get_github_token() == "from-dotenv"


def test_empty_token_counts_as_missing(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "")
    assert get_github_token() is None


@pytest.mark.parametrize("value", ["abc", ""])
def test_invalid_timeout_raises_configuration_error(monkeypatch, tmp_path, value):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PEPITO_GIST_TIMEOUT", value)
    with pytest.raises(ConfigurationError) as exc:
        get_settings()
    assert "timeout" in str(exc.value).lower()
    assert isinstance(exc.value.__cause__, ValidationError)


def test_invalid_dotenv_value_raises_configuration_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PEPITO_GIST_TIMEOUT", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "t")
    (tmp_path / ".env").write_text("PEPITO_GIST_TIMEOUT=abc\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        get_github_token()


def test_settings_read_on_each_call(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PEPITO_GIST_TIMEOUT", "1")
    assert get_settings().timeout == 1.0
    monkeypatch.setenv("PEPITO_GIST_TIMEOUT", "2")
    assert get_settings().timeout == 2.0
