"""Client configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_URL = "https://api.kraken.com"
DEFAULT_VERSION = "0"
DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = "Kraken Python API Client"


class ClientConfig(BaseModel):
    """
    Immutable settings fixed when the client is constructed.

    Attributes:
        url: API base URL, without trailing slash
        version: API version path segment
        timeout: Request deadline in seconds
        user_agent: Value of the User-Agent header sent on every request
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_URL
    version: str = DEFAULT_VERSION
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def public_path(self, method: str) -> str:
        return f"/{self.version}/public/{method}"

    def private_path(self, method: str) -> str:
        return f"/{self.version}/private/{method}"
