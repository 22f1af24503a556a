"""Infrastructure adapters: persistence and caching."""
