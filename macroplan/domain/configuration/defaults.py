"""Seed tables for the configuration store and workout type catalog."""

from typing import List

from .core.entities.config_item import ConfigItem
from .core.entities.workout_type import WorkoutTypeDefinition
from .core.value_objects.config_category import ConfigCategory

_A = ConfigCategory.ACTIVITY_LEVEL
_G = ConfigCategory.GOAL_ADJUSTMENT
_M = ConfigCategory.MACRO_RATIO
_S = ConfigCategory.SPECIAL_DAY

# key, value, category, label, description
_CONFIG_ROWS = [
    ("activity_sedentary", 1.2, _A, "Sedentary Multiplier", "Little to no exercise"),
    ("activity_light", 1.375, _A, "Light Activity Multiplier", "Light exercise 1-3 days/week"),
    ("activity_moderate", 1.55, _A, "Moderate Activity Multiplier", "Moderate exercise 3-5 days/week"),
    ("activity_very_active", 1.725, _A, "Very Active Multiplier", "Hard exercise 6-7 days/week"),
    ("activity_extra_active", 1.9, _A, "Extra Active Multiplier", "Very hard exercise, physical job"),
    ("activity_athlete", 2.0, _A, "Athlete Multiplier", "Intense training twice daily"),
    ("goal_weight_loss", 0.8, _G, "Weight Loss Multiplier", "20% calorie deficit"),
    ("goal_maintenance", 1.0, _G, "Maintenance Multiplier", "Maintain current weight"),
    ("goal_muscle_gain", 1.1, _G, "Muscle Gain Multiplier", "10% calorie surplus"),
    ("macro_protein_weight_loss", 0.35, _M, "Protein Ratio (Weight Loss)", "35% of calories from protein"),
    ("macro_fat_weight_loss", 0.30, _M, "Fat Ratio (Weight Loss)", "30% of calories from fat"),
    ("macro_protein_muscle_gain", 0.30, _M, "Protein Ratio (Muscle Gain)", "30% of calories from protein"),
    ("macro_fat_muscle_gain", 0.25, _M, "Fat Ratio (Muscle Gain)", "25% of calories from fat"),
    ("macro_protein_maintenance", 0.25, _M, "Protein Ratio (Maintenance)", "25% of calories from protein"),
    ("macro_fat_maintenance", 0.30, _M, "Fat Ratio (Maintenance)", "30% of calories from fat"),
    ("macro_min_protein_per_kg", 1.6, _M, "Min Protein per kg", "Minimum grams of protein per kg body weight"),
    ("workout_day_multiplier", 1.1, _S, "Workout Day Calorie Boost", "10% more calories on workout days"),
    ("rest_day_multiplier", 0.9, _S, "Rest Day Calorie Reduction", "10% fewer calories on rest days"),
    ("workout_day_protein_per_kg", 2.0, _S, "Workout Day Protein (g/kg)", "Protein per kg on workout days"),
    ("rest_day_protein_per_kg", 1.8, _S, "Rest Day Protein (g/kg)", "Protein per kg on rest days"),
    ("workout_day_fat_ratio", 0.25, _S, "Workout Day Fat Ratio", "25% of calories from fat on workout days"),
    ("rest_day_fat_ratio", 0.35, _S, "Rest Day Fat Ratio", "35% of calories from fat on rest days"),
]

# key, name, intensity, icon, color, description
_WORKOUT_TYPE_ROWS = [
    ("rest", "Rest", 0.0, "Moon", "slate", "Recovery day, no training"),
    ("strength", "Strength", 1.0, "Dumbbell", "blue", "Moderate (~5-6 METs)"),
    ("cardio", "Cardio", 1.1, "Heart", "rose", "Vigorous (~7-10 METs)"),
    ("running", "Running", 1.2, "Footprints", "orange", "Vigorous (~8-12 METs)"),
    ("cycling", "Cycling", 0.9, "Bike", "lime", "Moderate to vigorous (~6-8 METs)"),
    ("swimming", "Swimming", 1.0, "Waves", "cyan", "Moderate to vigorous (~6-10 METs)"),
    ("hiit", "HIIT", 1.6, "Zap", "amber", "Extreme (~12-15 METs)"),
    ("crossfit", "CrossFit", 1.7, "Flame", "red", "Extreme (~12-16 METs)"),
    ("yoga", "Yoga", 0.6, "Sparkles", "purple", "Light to moderate (~3-4 METs)"),
    ("pilates", "Pilates", 0.7, "PersonStanding", "pink", "Moderate (~4 METs)"),
    ("boxing", "Boxing", 1.5, "Hand", "yellow", "Very vigorous (~10-13 METs)"),
    ("martial_arts", "Martial Arts", 1.4, "Swords", "indigo", "Very vigorous (~10-12 METs)"),
    ("dance", "Dance", 0.9, "Music", "fuchsia", "Moderate to vigorous (~5-8 METs)"),
    ("climbing", "Climbing", 1.2, "Mountain", "stone", "Vigorous (~8-11 METs)"),
    ("walking", "Walking", 0.5, "TreePine", "green", "Light activity (~3.5 METs)"),
    ("sports", "Sports", 1.2, "Trophy", "emerald", "Variable (~6-12 METs)"),
    ("other", "Other", 1.0, "MoreHorizontal", "teal", "Default moderate intensity"),
]


def default_config_items() -> List[ConfigItem]:
    """Fresh ConfigItem instances for the seed table."""
    return [
        ConfigItem(key=key, value=value, category=category, label=label, description=description)
        for key, value, category, label, description in _CONFIG_ROWS
    ]


def default_workout_types() -> List[WorkoutTypeDefinition]:
    """Fresh built-in workout type definitions, in picker order."""
    return [
        WorkoutTypeDefinition(
            key=key,
            name=name,
            intensity=intensity,
            icon=icon,
            color=color,
            description=description,
            sort_order=position,
            is_active=True,
            is_default=True,
        )
        for position, (key, name, intensity, icon, color, description) in enumerate(
            _WORKOUT_TYPE_ROWS
        )
    ]
