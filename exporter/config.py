"""
Environment driven settings for talking to the serving API.
"""

import os
import logging
from typing import Optional, Union
from pydantic import BaseModel, Field, ValidationError

from .errors import UsageError

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "https://kubernetes.default.svc"
DEFAULT_NAMESPACE = "default"
DEFAULT_TIMEOUT = 30.0

class Settings(BaseModel):
    """Connection settings for the serving API."""
    server: str = Field(DEFAULT_SERVER, description="Kubernetes API server URL")
    token: Optional[str] = Field(None, description="Bearer token")
    namespace: str = Field(DEFAULT_NAMESPACE, description="Namespace used when none is given")
    verify_ssl: bool = Field(True, description="Verify the server certificate")
    ca_bundle: Optional[str] = Field(None, description="CA bundle used for verification")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds")

    @property
    def verify(self) -> Union[bool, str]:
        """Value for the ``verify`` argument of requests."""
        if self.ca_bundle:
            return self.ca_bundle
        return self.verify_ssl

def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()

def load_settings() -> Settings:
    """
    Read settings from KNEXPORT_* environment variables.

    Raises:
        UsageError: If a variable holds a malformed value
    """
    values = {
        "server": _env("KNEXPORT_SERVER"),
        "token": _env("KNEXPORT_TOKEN"),
        "namespace": _env("KNEXPORT_NAMESPACE"),
        "verify_ssl": _env("KNEXPORT_VERIFY_SSL"),
        "ca_bundle": _env("KNEXPORT_CA_BUNDLE"),
        "timeout": _env("KNEXPORT_TIMEOUT"),
    }
    try:
        settings = Settings(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as e:
        raise UsageError(f"Invalid configuration: {e}")

    logger.debug(f"Using API server {settings.server} (namespace {settings.namespace})")
    return settings
