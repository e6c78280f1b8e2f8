"""HTTP manager configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_INSECURE_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "http-manager/0.1.0"


class HttpClientSettings(BaseSettings):
    """HTTP client configuration settings.

    All settings can be overridden via environment variables with
    the HTTP_MANAGER_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="HTTP_MANAGER_",
        case_sensitive=False
    )

    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        description="Connection timeout in seconds, applied independently of the overall timeout"
    )
    insecure_timeout: float = Field(
        default=DEFAULT_INSECURE_TIMEOUT,
        description="Overall timeout in seconds for the non-TLS convenience get/post"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    connection_verbose: bool = Field(
        default=True,
        description="Log every request and response at DEBUG level"
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_config_file: str = Field(
        default="logging.yml",
        description="Path to logging configuration file, relative to the package"
    )
