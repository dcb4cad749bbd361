import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from lib.telemetry.logger import DEFAULT_FORMAT, get_logger
from lib.utils.validation import ensure

from .yaml_loader import load_yaml

CONFIG_ENV_VAR = "SAMPLE_API_CONFIG"
DEFAULT_CONFIG_PATH = "config/sample_api.yaml"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9000
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class ServerConfig:
    """Typed view over ``sample_api.yaml``.

    Every key is optional; absent values fall back to the module defaults so
    the service starts on port 9000 without any configuration file at all.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_FORMAT
    raw: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ensure(
            isinstance(self.port, int) and not isinstance(self.port, bool),
            f"server.port must be an integer, got {self.port!r}",
        )
        ensure(1 <= self.port <= 65535, f"server.port out of range: {self.port}")
        self.log_level = str(self.log_level).upper()
        ensure(
            self.log_level in _LOG_LEVELS,
            f"logging.level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}",
        )


def load_server_config(path: Optional[str] = None) -> ServerConfig:
    """Load ``sample_api.yaml`` and return a :class:`ServerConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML file.  When omitted the
        ``SAMPLE_API_CONFIG`` environment variable is consulted, then
        ``config/sample_api.yaml``.  A missing file yields the defaults.
    """

    path = path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    if not Path(path).exists():
        get_logger(__name__).info("config %s not found, using defaults", path)
        return ServerConfig()

    raw = load_yaml(path)
    server = raw.get("server") or {}
    log = raw.get("logging") or {}
    return ServerConfig(
        host=server.get("host", DEFAULT_HOST),
        port=server.get("port", DEFAULT_PORT),
        log_level=log.get("level", DEFAULT_LOG_LEVEL),
        log_format=log.get("format", DEFAULT_FORMAT),
        raw=raw,
    )
