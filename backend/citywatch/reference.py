"""
Static reference tables.

All tables are read-only (``MappingProxyType`` / ``frozenset``) and are
passed into the services at construction time. The values here are only the
defaults.
"""

from collections.abc import Mapping
from types import MappingProxyType

from citywatch.models.incident import Coordinates, IncidentCategory, IncidentStatus, Role

C = IncidentCategory

# Full category universe, in display order
CATEGORIES: tuple[str, ...] = tuple(category.value for category in IncidentCategory)

# Role -> categories the role may see (and, when write scope is enforced, act on)
ROLE_CATEGORIES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        Role.PUBLIC: frozenset(CATEGORIES),
        Role.POLICE: frozenset({C.CRIME, C.ACCIDENT}),
        Role.MEDICAL: frozenset({C.MEDICAL}),
        Role.FIREFIGHTER: frozenset({C.FIRE}),
    }
)

# Bangalore localities (longitude, latitude)
LOCATION_COORDINATES: Mapping[str, Coordinates] = MappingProxyType(
    {
        "Indiranagar": Coordinates(longitude=77.6408, latitude=12.9716),
        "HSR Layout": Coordinates(longitude=77.6413, latitude=12.9141),
        "Electronic City": Coordinates(longitude=77.6726, latitude=12.8458),
        "Brigade Road": Coordinates(longitude=77.5946, latitude=12.9716),
        "Whitefield": Coordinates(longitude=77.7248, latitude=12.9692),
        "Hebbal": Coordinates(longitude=77.5946, latitude=13.0507),
        "BTM Layout": Coordinates(longitude=77.6101, latitude=12.9165),
        "Koramangala": Coordinates(longitude=77.6245, latitude=12.9349),
        "MG Road": Coordinates(longitude=77.5946, latitude=12.9716),
        "Yeshwanthpur": Coordinates(longitude=77.5483, latitude=13.0160),
    }
)

# Fallback for unknown location labels
CITY_CENTER = Coordinates(longitude=77.5946, latitude=12.9716)

DEFAULT_COLOR = "#6b7280"
DEFAULT_ICON = "📋"

CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        C.FIRE: "#ef4444",
        C.MEDICAL: "#10b981",
        C.CRIME: "#f59e0b",
        C.ACCIDENT: "#8b5cf6",
        C.TRAFFIC: "#3b82f6",
        C.GARBAGE: "#6b7280",
        C.POLLUTION: "#059669",
        C.POTHOLES: "#dc2626",
    }
)

CATEGORY_ICONS: Mapping[str, str] = MappingProxyType(
    {
        C.FIRE: "🔥",
        C.MEDICAL: "🏥",
        C.CRIME: "🚔",
        C.ACCIDENT: "🚗",
        C.TRAFFIC: "🚦",
        C.GARBAGE: "🗑️",
        C.POLLUTION: "🌫️",
        C.POTHOLES: "🕳️",
    }
)

STATUS_COLORS: Mapping[str, str] = MappingProxyType(
    {
        IncidentStatus.NEW: "#ef4444",
        IncidentStatus.ACKNOWLEDGED: "#f59e0b",
        IncidentStatus.RESOLVED: "#10b981",
    }
)


def category_color(category: str) -> str:
    """Map color for a category (grey for unknown categories)."""
    return CATEGORY_COLORS.get(category, DEFAULT_COLOR)


def category_icon(category: str) -> str:
    """Marker icon for a category."""
    return CATEGORY_ICONS.get(category, DEFAULT_ICON)


def status_color(status: str) -> str:
    """Badge color for a workflow status."""
    return STATUS_COLORS.get(status, DEFAULT_COLOR)
