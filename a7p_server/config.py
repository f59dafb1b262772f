import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    files_dir: Path
    static_dir: Path | None = None
    host: str = "0.0.0.0"
    port: int = 443
    cert_file: Path | None = None
    key_file: Path | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in 1..65535, got {self.port}")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int) or level == logging.NOTSET:
            raise ValueError(f"unknown log level: {self.log_level}")
        # Canonical name, e.g. WARN -> WARNING, FATAL -> CRITICAL.
        object.__setattr__(self, "log_level", logging.getLevelName(level))

    @property
    def tls_enabled(self) -> bool:
        return self.cert_file is not None and self.key_file is not None


def _optional_path(key: str, default: str | None = None) -> Path | None:
    value = os.getenv(key, default)
    return Path(value) if value else None


def load_config() -> AppConfig:
    """Build the config from A7P_* environment variables.

    - A7P_FILES_DIR (default: ".")
    - A7P_STATIC_DIR (optional)
    - A7P_HOST (default: "0.0.0.0")
    - A7P_PORT (default: 443)
    - A7P_CERT_FILE / A7P_KEY_FILE (default: "cert.pem" / "key.pem")
    - A7P_LOG_LEVEL (default: "INFO")
    """
    port = os.getenv("A7P_PORT")
    return AppConfig(
        files_dir=Path(os.getenv("A7P_FILES_DIR") or "."),
        static_dir=_optional_path("A7P_STATIC_DIR"),
        host=os.getenv("A7P_HOST") or "0.0.0.0",
        port=int(port) if port else 443,
        cert_file=_optional_path("A7P_CERT_FILE", "cert.pem"),
        key_file=_optional_path("A7P_KEY_FILE", "key.pem"),
        log_level=(os.getenv("A7P_LOG_LEVEL") or "INFO").upper(),
    )
