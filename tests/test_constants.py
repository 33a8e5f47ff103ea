"""
Realistic test constants for FoodBin test suite.

Weights are typical fast-food portion sizes in grams.
"""

from datetime import date, timedelta

PORTIONS = {
    "Pizza": 300,
    "Fries": 150,
    "Hotdog": 100,
    "Burger": 250,
    "Sandwich": 200,
}


def best_before_in(days: int) -> date:
    """Best-before date ``days`` from today."""
    return date.today() + timedelta(days=days)
