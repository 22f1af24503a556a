"""Configuration bounded context.

Operator-tunable coefficients (ConfigStore) and workout type
definitions with their intensity multipliers (WorkoutIntensityCatalog).
"""
