"""White label generator: brand configurations for branded mobile app builds."""

__version__ = "0.1.0"
