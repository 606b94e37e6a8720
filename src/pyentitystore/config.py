"""Client configuration for pyentitystore."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

#: Message used when a failure carries no usable text at all.
DEFAULT_ERROR_MESSAGE = "Unknown error"


@dataclasses.dataclass(frozen=True)
class Configuration:
    """Configuration handed to ``init_api`` of a store or client.

    Parameters
    ----------
    base_url : str
        Root URL every endpoint path is appended to.
    headers : dict[str, str]
        Extra headers sent with every request.
    timeout : float
        Total request timeout in seconds.
    default_error_message : str
        Fallback text for failures that carry no message.
    """

    base_url: str = "http://localhost:8000"
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    timeout: float = 30.0
    default_error_message: str = DEFAULT_ERROR_MESSAGE

    @classmethod
    def from_env(cls, **overrides: Any) -> Configuration:
        """Create configuration from ``ENTITYSTORE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        base_url = env.get("ENTITYSTORE_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url.rstrip("/")

        timeout_env = env.get("ENTITYSTORE_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            config_kwargs["timeout"] = float(timeout_env)

        message_env = env.get("ENTITYSTORE_DEFAULT_ERROR_MESSAGE")
        if message_env:
            config_kwargs["default_error_message"] = message_env

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
