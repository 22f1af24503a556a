"""Value objects for configuration domain."""

from .config_category import ConfigCategory

__all__ = ["ConfigCategory"]
