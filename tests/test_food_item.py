"""
Tests for the FoodItem record and the item creation schema.
"""

import pytest
from datetime import date, datetime
from pydantic import ValidationError

from domain.enums import FoodName
from domain.models import FoodItem
from domain.schemas.storage_schemas import FoodItemCreate
from test_fixtures import make_item
from test_constants import best_before_in


# =============================================================================
# FOOD ITEM
# =============================================================================


def test_food_item_captures_placed_time():
    before = datetime.now()
    item = FoodItem(name="Pizza", weight=300, best_before=best_before_in(3))
    after = datetime.now()

    assert before <= item.placed_time <= after


def test_food_item_is_immutable():
    """
    Verifies:
    - Assigning any field after construction is rejected
    - The original value is kept
    """
    item = make_item("Burger")

    with pytest.raises(ValidationError):
        item.weight = 1
    with pytest.raises(ValidationError):
        item.name = "Pizza"

    assert item.weight == 250
    assert item.name == "Burger"


def test_food_item_rejects_non_positive_weight():
    with pytest.raises(ValidationError):
        FoodItem(name="Fries", weight=0, best_before=best_before_in(1))
    with pytest.raises(ValidationError):
        FoodItem(name="Fries", weight=-5, best_before=best_before_in(1))


def test_food_item_rejects_empty_name():
    with pytest.raises(ValidationError):
        FoodItem(name="", weight=100, best_before=best_before_in(1))


def test_food_item_does_not_check_vocabulary():
    """The record itself accepts any non-empty name; vocabulary is checked by callers."""
    item = FoodItem(name="Taco", weight=120, best_before=best_before_in(1))
    assert item.name == "Taco"


def test_food_item_matches_ignores_case():
    item = make_item("Hotdog")

    assert item.matches("hotdog")
    assert item.matches("HOTDOG")
    assert not item.matches("hot dog")
    assert not item.matches(None)


def test_food_item_str():
    placed = datetime(2025, 3, 1, 12, 30, 0)
    item = make_item("Pizza", 300, date(2025, 3, 10), placed_time=placed)

    assert str(item) == "Pizza (300g) - BestBefore: 2025-03-10 - Placed: 2025-03-01T12:30:00"


# =============================================================================
# CREATE SCHEMA
# =============================================================================


@pytest.mark.parametrize("name", ["Burger", "pizza", "FRIES", "  Sandwich  ", "hotDog"])
def test_create_schema_accepts_vocabulary_any_case(name):
    payload = FoodItemCreate(name=name, weight=100)
    assert payload.name == name.strip()
    assert payload.best_before is None


@pytest.mark.parametrize("name", ["Taco", "hot dog", "   ", "Burgers"])
def test_create_schema_rejects_unknown_names(name):
    with pytest.raises(ValidationError) as exc_info:
        FoodItemCreate(name=name, weight=100)
    assert "Invalid food name" in str(exc_info.value) or "at least 1" in str(exc_info.value)


def test_create_schema_rejects_zero_weight():
    with pytest.raises(ValidationError):
        FoodItemCreate(name="Pizza", weight=0)


def test_food_name_display_names():
    assert FoodName.display_names() == "Burger, Pizza, Fries, Sandwich, Hotdog"
    assert not FoodName.is_valid(None)
