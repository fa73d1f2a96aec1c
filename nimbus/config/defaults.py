"""Default locations, one per hemisphere quadrant."""

from nimbus.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        name="Oslo",
        latitude=59.9139,
        longitude=10.7522,
        timezone="Europe/Oslo",
    ),
    LocationConfig(
        name="New York City",
        latitude=40.7128,
        longitude=-74.0060,
        timezone="America/New_York",
    ),
    LocationConfig(
        name="Sydney",
        latitude=-33.8688,
        longitude=151.2093,
        timezone="Australia/Sydney",
    ),
    LocationConfig(
        name="Santiago",
        latitude=-33.4489,
        longitude=-70.6693,
        timezone="America/Santiago",
    ),
]
