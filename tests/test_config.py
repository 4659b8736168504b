import pytest

from themestars.config import Config
from themestars.manifest import DEFAULT_MANIFEST_URL

ENV_KEYS = ("GITHUB_TOKEN", "MANIFEST_URL", "OUTPUT_FILE", "HTTP_TIMEOUT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env_file(tmp_path):
    config = Config.from_env(str(tmp_path / "missing.env"))

    assert config.github_token == ""
    assert config.manifest_url == DEFAULT_MANIFEST_URL
    assert config.output_file == "README.md"
    assert config.http_timeout == 30.0
    assert config.log_level == "INFO"


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env.local"
    env_file.write_text(
        "GITHUB_TOKEN=ghp_secret\nOUTPUT_FILE=THEMES.md\nHTTP_TIMEOUT=none\nLOG_LEVEL=debug\n",
        encoding="utf-8",
    )

    config = Config.from_env(str(env_file))

    assert config.github_token == "ghp_secret"
    assert config.output_file == "THEMES.md"
    assert config.http_timeout is None
    assert config.log_level == "DEBUG"


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env.local"
    env_file.write_text("GITHUB_TOKEN=from_file\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_TOKEN", "from_env")

    assert Config.from_env(str(env_file)).github_token == "from_env"


def test_invalid_timeout(monkeypatch, tmp_path):
    monkeypatch.setenv("HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        Config.from_env(str(tmp_path / "missing.env"))


@pytest.mark.parametrize("raw", ["0", "0.0", "none"])
def test_zero_timeout_disables_timeouts(monkeypatch, tmp_path, raw):
    monkeypatch.setenv("HTTP_TIMEOUT", raw)

    assert Config.from_env(str(tmp_path / "missing.env")).http_timeout is None


def test_negative_timeout_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("HTTP_TIMEOUT", "-1")

    with pytest.raises(ValueError):
        Config.from_env(str(tmp_path / "missing.env"))
