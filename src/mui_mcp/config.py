"""Configuration settings for the MUI MCP Server."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

_TRANSPORTS = ("stdio", "sse", "streamable-http")


class Settings(BaseSettings):
    """MUI MCP Server configuration.

    Environment variables:
    - MCP_TRANSPORT: "stdio" | "sse" | "streamable-http" (default: stdio)
    - MCP_HOST: Bind address for the HTTP transports (default: 127.0.0.1)
    - MCP_PORT: Port for the HTTP transports (default: 8000)
    - TOOL_TIMEOUT: Seconds before a docs lookup is abandoned (0 = no timeout)
    - WRAP_UNTRUSTED: Wrap scraped page content in safety markers (default: true)
    - LOG_LEVEL: Loguru level for the stderr sink (default: INFO)
    """

    # Transport
    mcp_transport: str = "stdio"
    mcp_host: str = "127.0.0.1"
    mcp_port: int = 8000

    # Tool execution timeout (seconds, 0 = no timeout)
    tool_timeout: int = 60

    wrap_untrusted: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": False}

    @field_validator("mcp_transport")
    @classmethod
    def _check_transport(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in _TRANSPORTS:
            raise ValueError(
                f"Unknown transport '{value}'. Valid transports: {', '.join(_TRANSPORTS)}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()
