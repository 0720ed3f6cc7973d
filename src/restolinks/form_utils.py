"""Helpers that apply normalized links to restaurant form data."""
from typing import Optional, Dict, Any, Mapping

from .config import get_settings, get_placeholder_image
from .models import ImageLink, PlaceExtraction
from .imgur_utils import is_valid_imgur_url, convert_imgur_url, extract_imgur_image_id
from .cloudinary_utils import (
    is_valid_cloudinary_url,
    convert_cloudinary_url,
    extract_cloudinary_public_id,
)


PLACE_FORM_FIELDS = ('name', 'location', 'source_url')


def normalize_image_url(url: Optional[str], placeholder: Optional[str] = None) -> str:
    """Get the image URL to store for a restaurant.

    Args:
        url: Image link from the form
        placeholder: Image used when no link was given (defaults to settings)

    Returns:
        Direct image URL, the link unchanged, or the placeholder
    """
    if not url or not isinstance(url, str) or not url.strip():
        return placeholder or get_placeholder_image()

    url = url.strip()
    if is_valid_imgur_url(url):
        return convert_imgur_url(url)
    return url


def describe_image_link(url: str, quality: Optional[int] = None) -> ImageLink:
    """Classify and normalize an image link.

    Args:
        url: Image link
        quality: Cloudinary quality (defaults to settings)

    Returns:
        ImageLink with provider, identifier and direct URL
    """
    if is_valid_imgur_url(url):
        return ImageLink(
            source_url=url,
            direct_url=convert_imgur_url(url),
            provider='imgur',
            image_id=extract_imgur_image_id(url),
        )

    if is_valid_cloudinary_url(url):
        if quality is None:
            quality = get_settings().image_quality
        return ImageLink(
            source_url=url,
            direct_url=convert_cloudinary_url(url, quality=quality),
            provider='cloudinary',
            image_id=extract_cloudinary_public_id(url),
        )

    return ImageLink(source_url=url, direct_url=url)


def apply_place_to_form(form: Mapping[str, Any], place: PlaceExtraction) -> Dict[str, Any]:
    """Merge extracted place data into restaurant form values.

    Only name, location and source_url are taken over; fields the link
    did not encode keep their previous form value.

    Args:
        form: Current form values (not modified)
        place: Extraction result

    Returns:
        New dict with the merged values
    """
    merged = dict(form)
    for field in PLACE_FORM_FIELDS:
        value = getattr(place, field)
        if value:
            merged[field] = value
    return merged
