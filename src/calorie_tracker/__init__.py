"""Calorie tracker: food logging, weight tracking and nutrition analytics."""
