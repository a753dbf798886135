"""Server configuration read from environment variables."""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

DEFAULT_KEGG_REST_BASE = "https://rest.kegg.jp"

TRUTHY = {"1", "true", "yes", "on"}


class ServerConfig(BaseModel):
    kegg_rest_base: str = DEFAULT_KEGG_REST_BASE
    kegg_timeout: float = 30.0
    # 0 disables the per-tool deadline
    tool_timeout: float = 60.0
    log_level: str = "INFO"
    standard_error_codes: bool = False

    @field_validator("kegg_rest_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("kegg_timeout", "tool_timeout")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("timeout must not be negative")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build the config from ``KEGG_*`` and ``MCP_*`` environment variables."""
        env = os.environ if environ is None else environ
        values = {
            "kegg_rest_base": env.get("KEGG_REST_BASE"),
            "kegg_timeout": env.get("KEGG_TIMEOUT"),
            "tool_timeout": env.get("MCP_TOOL_TIMEOUT"),
            "log_level": env.get("MCP_LOG_LEVEL"),
        }
        flag = env.get("MCP_STANDARD_ERROR_CODES")
        if flag is not None:
            values["standard_error_codes"] = flag.strip().lower() in TRUTHY
        return cls(**{key: value for key, value in values.items() if value is not None})
