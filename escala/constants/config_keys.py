"""Environment configuration keys."""


class ConfigKeys:
    """Names of the environment variables read by escala.config.env."""

    # Backend API
    API_URL = "ESCALA_API_URL"
    HTTP_TIMEOUT = "ESCALA_HTTP_TIMEOUT"

    # Logging
    LOG_LEVEL = "LOG_LEVEL"

    # Admin login
    ADMIN_EMAIL = "ESCALA_ADMIN_EMAIL"
    ADMIN_PASSWORD = "ESCALA_ADMIN_PASSWORD"


class ConfigDefaults:
    """Default values for environment configuration."""

    API_URL = "https://toprint-project.vercel.app/api"
    HTTP_TIMEOUT = "10"

    LOG_LEVEL = "info"
