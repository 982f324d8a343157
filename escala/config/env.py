"""Environment variables configuration."""

import os

from ..constants.config_keys import ConfigDefaults, ConfigKeys


def get_api_url() -> str:
    """Returns the backend API base URL, without a trailing slash."""
    url = os.getenv(ConfigKeys.API_URL) or ConfigDefaults.API_URL
    return url.rstrip("/")


def get_http_timeout() -> float:
    """Returns the HTTP timeout in seconds. Falls back to the default on bad input."""
    raw = os.getenv(ConfigKeys.HTTP_TIMEOUT, ConfigDefaults.HTTP_TIMEOUT)
    try:
        return float(raw)
    except ValueError:
        return float(ConfigDefaults.HTTP_TIMEOUT)


def get_log_level() -> str:
    return os.getenv(ConfigKeys.LOG_LEVEL, ConfigDefaults.LOG_LEVEL).lower()


def get_admin_credentials() -> tuple[str, str]:
    """Returns the (email, password) pair accepted for the admin role.

    Both are empty when unset, which disables admin login.
    """
    return (
        os.getenv(ConfigKeys.ADMIN_EMAIL, ""),
        os.getenv(ConfigKeys.ADMIN_PASSWORD, ""),
    )
