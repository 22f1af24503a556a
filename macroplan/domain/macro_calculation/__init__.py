"""Macro calculation bounded context.

Turns body metrics, a goal and a weekly workout schedule into BMR, TDEE
and daily calorie/macro targets, plus workout-day and rest-day variants.
"""
