"""CityWatch backend: role-scoped incident map for Bangalore."""

__version__ = "0.1.0"
