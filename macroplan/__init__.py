"""Macroplan backend - personalized daily calorie and macro targets."""
