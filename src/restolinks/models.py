"""Data models for restolinks."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class PlaceExtraction:
    """Place data extracted from a Google Maps link.

    Fields the link does not encode are left as None, so an absent value
    never looks like an empty string.
    """
    source_url: str
    name: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None  # "<lat>, <lng>" or the free-text address
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        """Check whether both coordinates were parsed."""
        return self.latitude is not None and self.longitude is not None

    @property
    def found(self) -> bool:
        """Check whether anything beyond the source URL was extracted."""
        return (
            self.name is not None or
            self.address is not None or
            self.has_coordinates
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict holding only the present fields.

        Returns:
            Dictionary with source_url and every field that is not None
        """
        data = {'source_url': self.source_url}
        for key in ('name', 'address', 'location', 'latitude', 'longitude'):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class ImageLink:
    """An image link pasted into a restaurant form."""
    source_url: str
    direct_url: str
    provider: Optional[str] = None  # imgur, cloudinary
    image_id: Optional[str] = None

    @property
    def converted(self) -> bool:
        """Check whether normalization changed the link."""
        return self.direct_url != self.source_url
