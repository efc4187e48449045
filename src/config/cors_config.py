"""CORS configuration for the browser-facing login/sign-up forms."""

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class CORSConfigurationError(Exception):
    """Raised when CORS configuration is invalid or insecure."""

    pass


def parse_comma_separated_list(value: str | list[str] | None) -> list[str]:
    """Parse comma-separated string or return as-is if already a list.

    Args:
        value: Comma-separated string or list

    Returns:
        List of values with whitespace stripped and blanks dropped

    """
    if value is None:
        return []

    if isinstance(value, list):
        return [v.strip() for v in value if v.strip()]

    return [v.strip() for v in value.split(",") if v.strip()]


def normalize_origin(origin: str) -> str:
    """Strip whitespace and trailing slashes from an origin URL.

    Raises:
        CORSConfigurationError: If the origin is empty or not a URL.

    """
    origin = origin.strip()

    if not origin:
        raise CORSConfigurationError("Origin cannot be empty")

    if origin == "*":
        return origin

    parsed = urlparse(origin)
    if not parsed.scheme or not parsed.netloc:
        raise CORSConfigurationError(f"Invalid origin URL: {origin}")

    return origin.rstrip("/")


class CORSConfiguration:
    """Validated CORS settings.

    Rules:
    - Wildcard origins cannot be combined with credentials
    - Wildcard origins are only allowed in development
    """

    def __init__(
        self,
        allow_origins: str | list[str] | None,
        allow_credentials: bool = False,
        max_age: int = 600,
        environment: str = "development",
    ):
        self.environment = environment.lower()
        self.allow_credentials = allow_credentials
        self.max_age = max_age
        self.allow_origins = [normalize_origin(o) for o in parse_comma_separated_list(allow_origins)]
        self.allow_methods = ["GET", "POST", "OPTIONS"]
        self.allow_headers = ["content-type"]

        self._validate_security_rules()

    def _validate_security_rules(self) -> None:
        has_wildcard = "*" in self.allow_origins

        if self.allow_credentials and has_wildcard:
            raise CORSConfigurationError(
                "Cannot enable credentials with wildcard origins (*). Provide explicit allowed origins instead."
            )

        if has_wildcard and self.environment != "development":
            raise CORSConfigurationError(f"Wildcard origins (*) are not allowed in {self.environment} environment.")

        if not self.allow_origins:
            logger.warning("No CORS origins configured; browsers on other origins will be blocked.")

    def get_middleware_config(self) -> dict:
        """Get configuration dict for FastAPI CORSMiddleware."""
        return {
            "allow_origins": self.allow_origins,
            "allow_credentials": self.allow_credentials,
            "allow_methods": self.allow_methods,
            "allow_headers": self.allow_headers,
            "max_age": self.max_age,
        }

    def log_configuration(self) -> None:
        logger.info(
            f"CORS configuration ({self.environment}): origins={self.allow_origins}, "
            f"credentials={self.allow_credentials}, max_age={self.max_age}s"
        )
