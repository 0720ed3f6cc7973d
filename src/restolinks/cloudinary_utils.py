"""Cloudinary link utilities for restolinks."""
import re
from typing import Optional

from .config import get_settings
from .exceptions import ConfigurationError


PUBLIC_ID_PATTERN = re.compile(r'/upload/(?:v\d+/)?(.+)\.[a-zA-Z]+$')


def _transformations(fmt: str, quality: int, width: Optional[int], height: Optional[int]) -> str:
    parts = [f"f_{fmt}", f"q_{quality}"]
    if width:
        parts.append(f"w_{width}")
    if height:
        parts.append(f"h_{height}")
    return ",".join(parts)


def is_valid_cloudinary_url(url: str) -> bool:
    """Check if a URL is a Cloudinary link.

    Args:
        url: URL to check

    Returns:
        True if the URL mentions cloudinary.com, False otherwise
    """
    if not url or not isinstance(url, str):
        return False
    return 'cloudinary.com' in url


def convert_cloudinary_url(url: str, width: Optional[int] = None,
                           height: Optional[int] = None, quality: int = 80) -> str:
    """Add delivery transformations to a Cloudinary upload URL.

    Args:
        url: Cloudinary URL
        width: Optional target width in pixels
        height: Optional target height in pixels
        quality: Compression quality (1-100)

    Returns:
        URL with ``f_auto,q_<quality>[,w_..][,h_..]`` inserted after
        ``/upload/``, or the input unchanged for other links
    """
    if not url or not isinstance(url, str):
        return url

    if not is_valid_cloudinary_url(url) or '/upload/' not in url:
        return url

    transformations = _transformations('auto', quality, width, height)
    return url.replace('/upload/', f'/upload/{transformations}/', 1)


def extract_cloudinary_public_id(url: str) -> Optional[str]:
    """Extract the public id from a Cloudinary URL.

    Args:
        url: Cloudinary URL

    Returns:
        Public id (path without version and extension) if found, None otherwise
    """
    if not url or not isinstance(url, str):
        return None

    match = PUBLIC_ID_PATTERN.search(url)
    return match.group(1) if match else None


def get_optimized_image_url(public_id: str, width: Optional[int] = None,
                            height: Optional[int] = None, quality: int = 80,
                            format: str = 'auto', cloud_name: Optional[str] = None) -> str:
    """Build an optimized delivery URL for a Cloudinary asset.

    Args:
        public_id: Asset public id
        width: Optional target width in pixels
        height: Optional target height in pixels
        quality: Compression quality (1-100)
        format: Delivery format (default auto)
        cloud_name: Cloudinary account (defaults to the configured one)

    Returns:
        Delivery URL

    Raises:
        ConfigurationError: If no cloud name is given or configured
    """
    cloud_name = cloud_name or get_settings().cloudinary_cloud_name
    if not cloud_name:
        raise ConfigurationError(
            "Cloudinary cloud name not configured (set RESTOLINKS_CLOUDINARY_CLOUD_NAME)"
        )

    transformations = _transformations(format, quality, width, height)
    return f"https://res.cloudinary.com/{cloud_name}/image/upload/{transformations}/v1/{public_id}"
