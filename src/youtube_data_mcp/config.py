"""
Server configuration, read once from the environment at process start.
"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Optional


# Default configuration
DEFAULT_LANGUAGE = "en"
DEFAULT_TRANSPORT = "http"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"

TRANSPORTS = ("http", "stdio")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("httpx", "urllib3", "uvicorn.access", "mcp.server.lowlevel.server", "mcp.server.streamable_http")


def normalize_log_level(level: str) -> str:
    """
    Return the canonical upper-case name for a logging level.

    Raises:
        ValueError: If the level is not one of LOG_LEVELS or an alias
    """
    name = level.strip().upper()
    name = LOG_LEVEL_ALIASES.get(name, name)
    if name not in LOG_LEVELS:
        raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{level}'")
    return name


def _env_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ServerConfig:
    """Configuration shared read-only by the services and the server."""

    api_key: Optional[str] = None
    default_language: str = DEFAULT_LANGUAGE
    transport: str = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    ssl_bypass: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "ServerConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (used by tests)

        Raises:
            ValueError: If a numeric or enumerated variable has an invalid value
        """
        env = os.environ if environ is None else environ

        transport = env.get("YOUTUBE_MCP_TRANSPORT", DEFAULT_TRANSPORT).strip().lower()
        if transport not in TRANSPORTS:
            raise ValueError(
                f"YOUTUBE_MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got '{transport}'"
            )

        try:
            port = int(env.get("PORT") or env.get("YOUTUBE_MCP_PORT") or DEFAULT_PORT)
            timeout = float(env.get("YOUTUBE_MCP_TIMEOUT") or DEFAULT_TIMEOUT)
        except ValueError as e:
            raise ValueError(f"Invalid numeric configuration value: {e}")

        return cls(
            api_key=env.get("YOUTUBE_API_KEY") or None,
            default_language=env.get("YOUTUBE_TRANSCRIPT_LANG") or DEFAULT_LANGUAGE,
            transport=transport,
            host=env.get("YOUTUBE_MCP_HOST") or DEFAULT_HOST,
            port=port,
            timeout=timeout,
            ssl_bypass=_env_bool(env.get("YOUTUBE_MCP_SSL_BYPASS")),
            log_level=normalize_log_level(env.get("YOUTUBE_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL),
        )

    def with_overrides(self, **overrides) -> "ServerConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure logging to stderr; stdout carries the protocol in stdio mode."""
    numeric_level = getattr(logging, normalize_log_level(level))

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if numeric_level > logging.DEBUG:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
