"""Settings for restolinks, read from the environment."""
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


DEFAULT_PLACEHOLDER_IMAGE = "/placeholder-restaurant.jpg"
DEFAULT_IMAGE_QUALITY = 80


@dataclass
class Settings:
    """Runtime settings.

    Args:
        cloudinary_cloud_name: Cloudinary account used for optimized image URLs
        placeholder_image: Image stored when a restaurant has no image link
        image_quality: Default Cloudinary quality (1-100)
    """
    cloudinary_cloud_name: Optional[str] = None
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    image_quality: int = DEFAULT_IMAGE_QUALITY


def _parse_quality(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_IMAGE_QUALITY
    try:
        quality = int(raw)
    except ValueError:
        raise ConfigurationError(f"RESTOLINKS_IMAGE_QUALITY must be an integer, got {raw!r}")
    if not 1 <= quality <= 100:
        raise ConfigurationError(f"RESTOLINKS_IMAGE_QUALITY must be between 1 and 100, got {quality}")
    return quality


def get_placeholder_image() -> str:
    """Get the placeholder image from RESTOLINKS_PLACEHOLDER_IMAGE.

    Returns:
        Configured placeholder, or the default one
    """
    return os.environ.get("RESTOLINKS_PLACEHOLDER_IMAGE") or DEFAULT_PLACEHOLDER_IMAGE


def get_settings() -> Settings:
    """Build settings from environment variables.

    Variables:
        RESTOLINKS_CLOUDINARY_CLOUD_NAME (falls back to CLOUDINARY_CLOUD_NAME)
        RESTOLINKS_PLACEHOLDER_IMAGE
        RESTOLINKS_IMAGE_QUALITY

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    cloud_name = (
        os.environ.get("RESTOLINKS_CLOUDINARY_CLOUD_NAME") or
        os.environ.get("CLOUDINARY_CLOUD_NAME")
    )
    return Settings(
        cloudinary_cloud_name=cloud_name or None,
        placeholder_image=get_placeholder_image(),
        image_quality=_parse_quality(os.environ.get("RESTOLINKS_IMAGE_QUALITY")),
    )
