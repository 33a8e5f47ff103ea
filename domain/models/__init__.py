"""
Domain models package.
"""

from domain.models.food_item import FoodItem

__all__ = ["FoodItem"]
