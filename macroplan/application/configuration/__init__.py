"""Use cases for configuration administration."""
