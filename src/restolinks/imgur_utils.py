"""Imgur link utilities for restolinks."""
import logging
import re
from typing import Optional


logger = logging.getLogger(__name__)

IMGUR_ID_PATTERN = re.compile(r'imgur\.com/(?:a/)?([a-zA-Z0-9]+)')
FRAGMENT_ID_PATTERN = re.compile(r'[a-zA-Z0-9]+')
DIRECT_IMAGE_HOST = 'i.imgur.com'


def is_valid_imgur_url(url: str) -> bool:
    """Check if a URL is an Imgur link.

    Args:
        url: URL to check

    Returns:
        True if the URL mentions imgur.com, False otherwise
    """
    if not url or not isinstance(url, str):
        return False
    return 'imgur.com' in url


def extract_imgur_image_id(url: str) -> Optional[str]:
    """Extract the image identifier from an Imgur URL.

    An alphanumeric fragment wins over the path, so
    ``imgur.com/a/<album>#<image>`` yields the image id. Without a
    fragment an album link yields the album id.

    Args:
        url: Imgur URL

    Returns:
        Image identifier if found, None otherwise
    """
    if not url or not isinstance(url, str):
        return None

    if '#' in url:
        fragment = url.split('#')[1]
        if FRAGMENT_ID_PATTERN.fullmatch(fragment):
            return fragment

    match = IMGUR_ID_PATTERN.search(url)
    return match.group(1) if match else None


def convert_imgur_url(url: str) -> str:
    """Convert an Imgur share link into a direct image URL.

    Args:
        url: Imgur URL as pasted by the user

    Returns:
        ``https://i.imgur.com/<id>l.jpg`` (large rendition), or the input
        unchanged if it is already direct or no identifier was found
    """
    if not url or not isinstance(url, str):
        return url

    if not is_valid_imgur_url(url) or DIRECT_IMAGE_HOST in url:
        return url

    image_id = extract_imgur_image_id(url)
    if not image_id:
        logger.debug("No Imgur image id in %s", url)
        return url

    return f"https://{DIRECT_IMAGE_HOST}/{image_id}l.jpg"
