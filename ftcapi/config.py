"""
Client configuration.

Values come from the environment (a local .env file is honoured):
  - FTC_SERVER             base URL, e.g. https://ftc-api.firstinspires.org/v2.0
  - FTC_USERNAME           HTTP Basic username
  - FTC_AUTHORIZATION_KEY  HTTP Basic password (the API token)
  - FTC_VERIFY_SSL         set to 0/false/no/off to skip certificate checks
  - FTC_TIMEOUT            request timeout in seconds
"""
import os
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

DEFAULT_SERVER = "https://ftc-api.firstinspires.org/v2.0"
DEFAULT_TIMEOUT = 30.0

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    server: str = DEFAULT_SERVER
    username: str = ""
    authorization_key: str = ""
    verify_ssl: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ClientConfig":
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        timeout_raw = os.environ.get("FTC_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"FTC_TIMEOUT must be a number, got {timeout_raw!r}") from None
        verify_raw = os.environ.get("FTC_VERIFY_SSL", "").strip().lower()

        return cls(
            server=os.environ.get("FTC_SERVER", "").strip() or DEFAULT_SERVER,
            username=os.environ.get("FTC_USERNAME", ""),
            authorization_key=os.environ.get("FTC_AUTHORIZATION_KEY", ""),
            verify_ssl=verify_raw not in _FALSE_VALUES,
            timeout=timeout,
        )

    def with_server(self, server: str) -> "ClientConfig":
        return replace(self, server=server)

    def with_credentials(self, username: str, authorization_key: str) -> "ClientConfig":
        return replace(self, username=username, authorization_key=authorization_key)

    @property
    def auth(self):
        """(username, key) tuple in the form requests expects for Basic auth."""
        return (self.username, self.authorization_key)
