"""Core model of the configuration domain."""
