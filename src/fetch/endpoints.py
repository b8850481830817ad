"""URL of the adoption listing page."""
from src.config import config


def get_listing_url() -> str:
    """Get the URL of the "adopt a cat" listing page."""
    return config.LISTING_URL
