"""restolinks - link normalization for restaurant lists."""

from .cli import cli
from .config import Settings, get_settings
from .exceptions import RestolinksError, ConfigurationError
from .models import PlaceExtraction, ImageLink
from .maps_utils import (
    is_valid_google_maps_url,
    extract_google_maps_data,
    format_location_string
)
from .imgur_utils import (
    is_valid_imgur_url,
    convert_imgur_url,
    extract_imgur_image_id
)
from .cloudinary_utils import (
    is_valid_cloudinary_url,
    convert_cloudinary_url,
    extract_cloudinary_public_id,
    get_optimized_image_url
)
from .form_utils import (
    normalize_image_url,
    describe_image_link,
    apply_place_to_form
)

__version__ = "0.1.0"

__all__ = [
    'cli',
    'Settings',
    'get_settings',
    'RestolinksError',
    'ConfigurationError',
    'PlaceExtraction',
    'ImageLink',
    'is_valid_google_maps_url',
    'extract_google_maps_data',
    'format_location_string',
    'is_valid_imgur_url',
    'convert_imgur_url',
    'extract_imgur_image_id',
    'is_valid_cloudinary_url',
    'convert_cloudinary_url',
    'extract_cloudinary_public_id',
    'get_optimized_image_url',
    'normalize_image_url',
    'describe_image_link',
    'apply_place_to_form',
]


def main():
    """Main entry point for CLI."""
    cli()
