"""Application layer: command and query handlers."""
