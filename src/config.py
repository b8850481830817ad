"""Configuration management from environment variables."""
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


def _env_list(name: str) -> list[str]:
    return [part.strip() for part in os.getenv(name, "").split(",") if part.strip()]


class Config:
    """Application configuration."""

    # Upstream
    LISTING_URL: str = os.getenv("LISTING_URL", "https://inges-kattehjem.dk/adopter-en-kat/")
    TIMEOUT: int = int(os.getenv("TIMEOUT", "20"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )

    # Default filters
    FILTER_TAGS: list[str] = _env_list("FILTER_TAGS")
    MIN_AGE_IN_MONTHS: float | None = _env_float("MIN_AGE_IN_MONTHS")
    MAX_AGE_IN_MONTHS: float | None = _env_float("MAX_AGE_IN_MONTHS")
    ONLY_AVAILABLE: bool = _env_bool("ONLY_AVAILABLE", "true")
    STRICT_MAX_AGE: bool = _env_bool("STRICT_MAX_AGE", "false")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # API Security
    API_KEY: str | None = os.getenv("API_KEY")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration."""
        errors = []
        if not cls.LISTING_URL.startswith(("http://", "https://")):
            errors.append("LISTING_URL must be an http(s) URL")
        if cls.TIMEOUT <= 0:
            errors.append("TIMEOUT must be positive")
        if cls.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a logging level")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

    @classmethod
    def default_filter_options(cls):
        """Build the filter options configured through the environment."""
        from src.parse.models import FilterOptions

        return FilterOptions(
            tags=cls.FILTER_TAGS,
            min_age_in_months=cls.MIN_AGE_IN_MONTHS,
            max_age_in_months=cls.MAX_AGE_IN_MONTHS,
            only_available=cls.ONLY_AVAILABLE,
            strict_max_age=cls.STRICT_MAX_AGE,
        )


config = Config()
