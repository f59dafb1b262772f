from pathlib import Path

import pytest

from a7p_server.config import AppConfig, load_config

_ENV = (
    "A7P_FILES_DIR",
    "A7P_STATIC_DIR",
    "A7P_HOST",
    "A7P_PORT",
    "A7P_CERT_FILE",
    "A7P_KEY_FILE",
    "A7P_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.files_dir == Path(".")
    assert cfg.static_dir is None
    assert cfg.port == 443
    assert cfg.cert_file == Path("cert.pem")
    assert cfg.key_file == Path("key.pem")
    assert cfg.tls_enabled
    assert cfg.log_level == "INFO"


def test_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("A7P_FILES_DIR", str(tmp_path))
    monkeypatch.setenv("A7P_STATIC_DIR", str(tmp_path / "www"))
    monkeypatch.setenv("A7P_PORT", "8443")
    monkeypatch.setenv("A7P_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.files_dir == tmp_path
    assert cfg.static_dir == tmp_path / "www"
    assert cfg.port == 8443
    assert cfg.log_level == "DEBUG"


def test_empty_cert_disables_tls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("A7P_CERT_FILE", "")
    assert not load_config().tls_enabled


@pytest.mark.parametrize("port", [0, 70000])
def test_invalid_port(port: int) -> None:
    with pytest.raises(ValueError, match="port"):
        AppConfig(files_dir=Path("."), port=port)


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("A7P_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="log level"):
        load_config()


@pytest.mark.parametrize(
    ("given", "canonical"),
    [("warn", "WARNING"), ("WARN", "WARNING"), ("fatal", "CRITICAL"), ("debug", "DEBUG")],
)
def test_log_level_aliases_are_canonicalised(given: str, canonical: str) -> None:
    cfg = AppConfig(files_dir=Path("."), log_level=given)
    assert cfg.log_level == canonical
    assert cfg.log_level.lower() in {"critical", "error", "warning", "info", "debug"}


def test_notset_log_level_rejected() -> None:
    with pytest.raises(ValueError, match="log level"):
        AppConfig(files_dir=Path("."), log_level="NOTSET")
