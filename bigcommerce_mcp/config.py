"""Server configuration.

Loads settings from environment variables (or a local ``.env`` file).
The access token and store hash have no defaults: without them the
server refuses to start.
"""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from bigcommerce_mcp.exceptions import ConfigurationError


class Settings(BaseSettings):
    """BigCommerce MCP server settings."""

    bigcommerce_access_token: str = Field(
        ...,
        min_length=1,
        description="Store API account access token, sent as X-Auth-Token",
    )
    bigcommerce_store_hash: str = Field(
        ...,
        min_length=1,
        description="Store hash embedded in the API base URLs",
    )
    bigcommerce_api_host: str = Field(
        default="api.bigcommerce.com",
        description="BigCommerce API host",
    )
    bigcommerce_request_timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds; unset means no timeout",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


_REQUIRED_ERROR_TYPES = {"missing", "string_too_short"}


def load_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If a required value is missing or a value
            cannot be parsed.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = []
        for error in e.errors():
            env_var = str(error["loc"][0]).upper() if error["loc"] else "SETTINGS"
            if error["type"] in _REQUIRED_ERROR_TYPES:
                problems.append(f"{env_var} environment variable required")
            else:
                problems.append(f"{env_var}: {error['msg']}")
        raise ConfigurationError(
            "; ".join(problems),
            details={"errors": problems},
        ) from e
