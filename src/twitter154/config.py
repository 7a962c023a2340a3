"""Client configuration: an options builder validated once into a frozen config."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from twitter154.errors import Twitter154Error
from twitter154.logging import get_logger
from twitter154.ratelimit import Limiter, RateLimiter, UnlimitedLimiter
from twitter154.settings import Settings, load_settings

log = get_logger("twitter154.config")

DEFAULT_HOST = "twitter154.p.rapidapi.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Resolved client settings, shared by reference by every call."""

    api_key: str = field(repr=False)
    host: str
    rate_limiter: Limiter
    http_client: httpx.Client = field(repr=False)
    owns_http_client: bool = False


@dataclass
class ClientOptions:
    """Optional client settings; anything left as None gets a default.

    Nothing is checked until `build`, which validates every field in one
    pass and reports all problems together.
    """

    host: str | None = None
    rate_limiter: Limiter | None = None
    http_client: httpx.Client | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ClientOptions:
        """Create options from environment settings.

        Raises:
            Twitter154Error: CONFIGURATION if the environment is malformed.
        """
        settings = settings or load_settings()
        rate_limiter = None
        if settings.twitter154_rate_limit is not None:
            rate_limiter = RateLimiter(settings.twitter154_rate_limit)

        return cls(
            host=settings.twitter154_host,
            rate_limiter=rate_limiter,
            timeout=settings.twitter154_timeout,
        )

    def build(self, api_key: str) -> ClientConfig:
        """Validate the options and resolve defaults.

        Args:
            api_key: RapidAPI key sent with every request.

        Returns:
            Immutable ClientConfig.

        Raises:
            Twitter154Error: CONFIGURATION, listing every invalid option.
        """
        problems: list[str] = []

        if not api_key:
            problems.append("api key is empty")

        if self.host is not None:
            problem = _check_host(self.host)
            if problem is not None:
                problems.append(problem)

        if self.rate_limiter is not None and not callable(getattr(self.rate_limiter, "take", None)):
            problems.append(f"rate limiter {self.rate_limiter!r} has no take()")

        if self.http_client is not None and not isinstance(self.http_client, httpx.Client):
            problems.append(f"http client must be an httpx.Client, got {type(self.http_client).__name__}")

        if self.timeout <= 0:
            problems.append(f"timeout must be positive, got {self.timeout}")

        if problems:
            raise Twitter154Error.configuration(problems)

        host = self.host or DEFAULT_HOST
        rate_limiter = self.rate_limiter or UnlimitedLimiter()
        owns_http_client = self.http_client is None
        http_client = self.http_client or httpx.Client(timeout=self.timeout)

        log.debug(
            "client_configured",
            host=host,
            rate_limiter=repr(rate_limiter),
            owns_http_client=owns_http_client,
        )

        return ClientConfig(
            api_key=api_key,
            host=host,
            rate_limiter=rate_limiter,
            http_client=http_client,
            owns_http_client=owns_http_client,
        )


def _check_host(host: str) -> str | None:
    """Probe the host by building a request for it locally."""
    if not host or any(ch.isspace() for ch in host):
        return f"invalid host {host!r}"

    try:
        request = httpx.Request("GET", f"https://{host}")
    except httpx.InvalidURL as e:
        return f"invalid host {host!r}: {e}"

    url = request.url
    if not url.host or url.path not in ("", "/") or url.query or url.fragment:
        return f"invalid host {host!r}"
    return None
