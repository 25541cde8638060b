"""
Recipe helpers: the per-order quantity calculator and recipe payload validation.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator, model_validator

from console.apps.menu.schemas import ApiModel
from console.utils.exceptions import RecipeValidationError

QUANTITY_PLACES = Decimal('0.001')
MIN_QUANTITY = 0.001


def quantize_quantity(value) -> float:
    return float(Decimal(str(value)).quantize(QUANTITY_PLACES, rounding=ROUND_HALF_UP))


def calculate_recipe_quantity(number_of_orders, previous_quantity=None, *,
                              target_selected=True, inventory_item_selected=True):
    """
    Quantity of an inventory item used by one order when one unit of it
    serves number_of_orders orders: 1 / number_of_orders, 3 decimal places.

    Returns previous_quantity unchanged when the calculator is disabled (no
    menu item/variant or sub-menu item chosen, or no inventory item on the
    recipe line) or when number_of_orders is not a positive number.
    """
    if not (target_selected and inventory_item_selected):
        return previous_quantity

    if isinstance(number_of_orders, bool):
        return previous_quantity
    try:
        orders = float(number_of_orders)
    except (TypeError, ValueError):
        return previous_quantity
    if not math.isfinite(orders) or orders <= 0:
        return previous_quantity

    return quantize_quantity(1 / orders)


class RecipeItem(ApiModel):
    inventory_item_id: int = Field(gt=0)
    quantity: float
    unit: str

    @field_validator('quantity')
    @classmethod
    def quantity_precision(cls, value):
        if not math.isfinite(value) or value < MIN_QUANTITY:
            raise ValueError(f"Quantity must be at least {MIN_QUANTITY}")
        return quantize_quantity(value)

    @field_validator('unit')
    @classmethod
    def unit_required(cls, value):
        if not value.strip():
            raise ValueError("Unit is required")
        return value.strip()


class Recipe(ApiModel):
    """A recipe belongs to a menu item variant or to a sub-menu item, never both"""
    branch_id: Optional[int] = None
    menu_item_id: Optional[int] = None
    variant_id: Optional[int] = None
    sub_menu_item_id: Optional[int] = None
    items: List[RecipeItem] = Field(min_length=1)

    @model_validator(mode='after')
    def single_association(self):
        menu_target = bool(self.menu_item_id) and bool(self.variant_id)
        sub_target = bool(self.sub_menu_item_id)
        if menu_target and sub_target:
            raise ValueError("Choose either a menu item variant or a sub-menu item, not both")
        if not (menu_target or sub_target):
            if self.menu_item_id and not self.variant_id:
                raise ValueError("Select a variant for the menu item")
            raise ValueError("Select a menu item variant or a sub-menu item")
        if sub_target:
            self.menu_item_id = None
            self.variant_id = None
        return self

    def to_api(self) -> dict:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


def validate_recipe(payload) -> Recipe:
    """Parse a recipe payload; raises RecipeValidationError with readable messages"""
    try:
        return Recipe.model_validate(payload)
    except ValidationError as e:
        messages = [error['msg'].removeprefix('Value error, ') for error in e.errors()]
        raise RecipeValidationError('. '.join(messages), details={'errors': messages}) from e
