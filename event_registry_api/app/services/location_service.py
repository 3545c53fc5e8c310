"""
Business logic for locations.
"""

from ..core.store import Collection
from ..schemas.location import Location
from .base import CollectionService


class LocationService(CollectionService[Location]):
    """Locations; deletes may match on ``name`` instead of ``id``."""

    collection = Collection.LOCATIONS
    record_type = Location
    alternate_key = "name"
