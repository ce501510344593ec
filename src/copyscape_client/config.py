"""Account credentials and endpoint settings.

Both models are frozen: they are built once at start-up and handed to
CopyscapeClient explicitly.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from copyscape_client.errors import ConfigError

DEFAULT_API_URL = "http://www.copyscape.com/api/"
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_ENCODING = "UTF-8"


class Credentials(BaseModel):
    """Copyscape account name and API key."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    api_key: str = Field(min_length=1, repr=False)


class ClientSettings(BaseModel):
    """Where and how the API is called."""

    model_config = ConfigDict(frozen=True)

    api_url: str = DEFAULT_API_URL
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    read_timeout: float | None = Field(default=None, gt=0)
    encoding: str = DEFAULT_ENCODING


def load_config(config_path: str | Path) -> tuple[Credentials, ClientSettings]:
    """Load credentials and settings from a YAML file.

    Expected keys: ``username``, ``api_key`` and optionally ``api_url``,
    ``connect_timeout``, ``read_timeout``, ``encoding``.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    for key in ("username", "api_key"):
        if not data.get(key):
            raise ConfigError(f"Missing required config key: {key}")

    settings_keys = ClientSettings.model_fields.keys()
    try:
        credentials = Credentials(username=str(data["username"]), api_key=str(data["api_key"]))
        settings = ClientSettings(**{k: v for k, v in data.items() if k in settings_keys})
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e

    return credentials, settings
