"""Client configuration.

Module constants hold the API defaults; ``ClientConfig`` bundles the values a
``MetalClient`` is built from and can be read from the environment:

    PACKET_METAL_API_URL   base URL (default: DEFAULT_BASE_URL)
    PACKET_METAL_TIMEOUT   request timeout in seconds (default: DEFAULT_TIMEOUT)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .core.exceptions import ValidationError

DEFAULT_BASE_URL = "https://api.equinix.com/metal/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "packet-metal-python/0.1.0"
MEDIA_TYPE = "application/json"

ENV_BASE_URL = "PACKET_METAL_API_URL"
ENV_TIMEOUT = "PACKET_METAL_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the API client.

    ``headers`` are sent with every request; credentials, if any, travel here
    as opaque header values.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValidationError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValidationError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> ClientConfig:
        """Build a config from environment variables, with keyword overrides on top."""
        env = os.environ if environ is None else environ
        values: dict = {}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            try:
                values["timeout"] = float(env[ENV_TIMEOUT])
            except ValueError as e:
                raise ValidationError(f"{ENV_TIMEOUT} is not a number: {env[ENV_TIMEOUT]!r}") from e
        values.update(overrides)
        return cls(**values)

    def request_headers(self) -> dict[str, str]:
        """Default headers merged with the configured extras."""
        return {
            "Accept": MEDIA_TYPE,
            "Content-Type": MEDIA_TYPE,
            "User-Agent": self.user_agent,
            **self.headers,
        }
