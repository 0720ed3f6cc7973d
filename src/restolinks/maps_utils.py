"""Google Maps link utilities for restolinks."""
import logging
import re
from typing import Optional, Tuple
from urllib.parse import urlparse, parse_qs, unquote_plus

from .models import PlaceExtraction


logger = logging.getLogger(__name__)

# google.com, google.de, google.co.uk, google.com.br
_GOOGLE_TLD = r'google\.(?:com|[a-z]{2})(?:\.[a-z]{2})?'
GOOGLE_HOST_PATTERN = re.compile(r'^(?:www\.)?' + _GOOGLE_TLD + r'$')
MAPS_HOST_PATTERN = re.compile(r'^maps\.' + _GOOGLE_TLD + r'$')
SHORT_LINK_HOSTS = ('maps.app.goo.gl',)

_COORD = r'(-?\d+(?:\.\d+)?)'
PLACE_WITH_COORDS_PATTERN = re.compile(r'/place/([^/@][^/]*)/(?:.*?/)?@' + _COORD + ',' + _COORD)
PLACE_NAME_PATTERN = re.compile(r'/place/([^/@][^/]*)')
COORDS_PATTERN = re.compile(r'@' + _COORD + ',' + _COORD)
QUERY_COORDS_PATTERN = re.compile(r'^' + _COORD + r'\s*,\s*' + _COORD + r'$')


def is_valid_google_maps_url(url: str) -> bool:
    """Check if a URL points at a Google Maps host.

    Args:
        url: URL to check

    Returns:
        True if the URL is an http(s) link on a recognized Maps host
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        logger.debug("Unparseable URL rejected: %r", url)
        return False

    if parsed.scheme not in ('http', 'https') or not parsed.hostname:
        return False

    host = parsed.hostname
    path = parsed.path

    if MAPS_HOST_PATTERN.match(host) or host in SHORT_LINK_HOSTS:
        return True
    if GOOGLE_HOST_PATTERN.match(host) or host == 'goo.gl':
        return path == '/maps' or path.startswith('/maps/')

    return False


def _decode_place_name(segment: str) -> Optional[str]:
    name = unquote_plus(segment).strip()
    return name or None


def _coordinates(lat_token: str, lng_token: str) -> Tuple[float, float, str]:
    # location keeps the tokens as written, no float round-trip
    return float(lat_token), float(lng_token), f"{lat_token}, {lng_token}"


def extract_google_maps_data(url: str) -> PlaceExtraction:
    """Extract place data from a Google Maps link.

    Shapes are tried in order and the first match wins:

    1. ``/place/<name>/@<lat>,<lng>,<zoom>z`` gives name and coordinates
    2. ``?q=<text>`` gives coordinates when the text is ``lat,lng``,
       otherwise an address
    3. ``@<lat>,<lng>,<zoom>z`` gives coordinates only
    4. ``/place/<name>`` without coordinates gives the name only

    Links matching none of them come back with only ``source_url`` set.

    Args:
        url: Google Maps URL as pasted by the user

    Returns:
        PlaceExtraction for the link
    """
    result = PlaceExtraction(source_url=url)

    if not url or not isinstance(url, str):
        return result

    try:
        parsed = urlparse(url)
    except ValueError:
        logger.debug("Unparseable Maps URL: %r", url)
        return result

    path = parsed.path

    match = PLACE_WITH_COORDS_PATTERN.search(path)
    if match:
        result.name = _decode_place_name(match.group(1))
        result.latitude, result.longitude, result.location = _coordinates(match.group(2), match.group(3))
        logger.debug("Matched place-with-coordinates shape: %s", url)
        return result

    query = parse_qs(parsed.query).get('q')
    if query and query[0].strip():
        text = query[0]
        coords = QUERY_COORDS_PATTERN.match(text.strip())
        if coords:
            result.latitude, result.longitude, result.location = _coordinates(coords.group(1), coords.group(2))
        else:
            result.address = text
            result.location = text
        logger.debug("Matched query-parameter shape: %s", url)
        return result

    match = COORDS_PATTERN.search(path)
    if match:
        result.latitude, result.longitude, result.location = _coordinates(match.group(1), match.group(2))
        logger.debug("Matched coordinates-only shape: %s", url)
        return result

    match = PLACE_NAME_PATTERN.search(path)
    if match:
        result.name = _decode_place_name(match.group(1))
        logger.debug("Matched place-name shape: %s", url)
        return result

    logger.debug("No Maps shape matched: %s", url)
    return result


def format_location_string(data: PlaceExtraction) -> str:
    """Format the location string used to fill the restaurant form.

    Args:
        data: Extraction result

    Returns:
        "<lat>, <lng>" when coordinates exist, the address otherwise, or ""
    """
    if data.has_coordinates:
        return f"{data.latitude}, {data.longitude}"
    if data.address:
        return data.address
    return ''
