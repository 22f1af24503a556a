"""Domain layer: pure calculation logic and configuration model."""
