"""Use cases for macro calculation."""
