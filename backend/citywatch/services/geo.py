"""Location label to coordinate lookup."""

from collections.abc import Iterable, Mapping

from citywatch.models.incident import Coordinates, Incident
from citywatch.reference import CITY_CENTER, LOCATION_COORDINATES


class GeoResolver:
    """
    Resolves free-text location labels against a fixed table.

    Lookup is exact and case-sensitive. Unknown labels resolve to the
    fallback point, so resolution never fails.
    """

    def __init__(
        self,
        table: Mapping[str, Coordinates] = LOCATION_COORDINATES,
        fallback: Coordinates = CITY_CENTER,
    ):
        self._table = table
        self.fallback = fallback

    def resolve(self, location: str | None) -> Coordinates:
        """Coordinates for a label, or the fallback point."""
        if location is None:
            return self.fallback
        return self._table.get(location, self.fallback)

    def is_known(self, location: str | None) -> bool:
        return location is not None and location in self._table

    def known_locations(self) -> list[str]:
        return list(self._table)

    def attach(self, incident: Incident) -> Incident:
        """Return a copy of the incident with coordinates set."""
        return incident.model_copy(
            update={"coordinates": self.resolve(incident.location)}
        )

    def attach_all(self, incidents: Iterable[Incident]) -> list[Incident]:
        return [self.attach(incident) for incident in incidents]
