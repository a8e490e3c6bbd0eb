"""
Credential loading.
The API key lives in a small JSON file next to the working directory: {"Key": "..."}.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stocklist.errors import CredentialError

logger = logging.getLogger(__name__)

CONFIG_PATH = ".apiConfig"


class ApiConfig(BaseModel):
    """Parsed contents of the credential file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: str = Field(alias="Key", min_length=1)


def load_api_key(path: str | Path = CONFIG_PATH) -> str:
    """Read the credential file and return the API key."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise CredentialError(f"failed to read config file {path}: {exc}") from exc

    try:
        config = ApiConfig.model_validate_json(data)
    except ValidationError as exc:
        raise CredentialError(f"failed to parse config file {path}: {exc}") from exc

    logger.debug("Loaded API key from %s", path)
    return config.key
