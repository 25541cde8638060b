"""
Order pricing.

Pure functions: per-line unit price (variant + modifiers + customizations,
less the item discount) and order totals composed from a branch's tax,
service charge and discount policy. All arithmetic is float; rounding happens
only in OrderTotals.as_display().
"""

import math
from dataclasses import asdict, dataclass
from typing import Iterable

from console.apps.branches.schemas import BranchConfiguration
from console.apps.menu.schemas import CustomerMenuItem, CustomerSearchMenu, Discount
from console.apps.orders.schemas import (
    DealSelection,
    LineSelection,
    MenuItemSelection,
    OrderLineRequest,
    SubMenuItemSelection,
)
from console.utils.currency import round_money
from console.utils.exceptions import InvalidSelectionError


@dataclass(frozen=True)
class OrderTotals:
    sub_total: float
    discount_amount: float
    taxable_amount: float
    tax_amount: float
    service_charges: float
    tip_amount: float
    total_amount: float

    def as_display(self) -> dict:
        return {name: round_money(value) for name, value in asdict(self).items()}


def apply_discount(price: float, discount: Discount = None) -> float:
    if discount is None:
        return price
    return price - (price * discount.value) / 100


def _menu_item_unit_price(selection: MenuItemSelection) -> float:
    item = selection.item
    variation = item.find_variation(selection.variant_id) if selection.variant_id is not None else None
    if variation is None:
        if not item.variations:
            raise InvalidSelectionError(
                f"{item.name or 'Menu item'} doesn't have any variations to select.",
                details={'menu_item_id': item.menu_item_id},
            )
        variation = item.variations[0]

    price = variation.price

    for selected in selection.modifiers:
        modifier = item.find_modifier(selected.modifier_id)
        if modifier is not None:
            price += modifier.price * selected.quantity

    for selected in selection.customizations:
        customization = item.find_customization(selected.customization_id)
        if customization is None:
            continue
        option = customization.find_option(selected.option_id)
        if option is not None:
            price += option.price

    return apply_discount(price, item.discount)


def resolve_line_price(selection: LineSelection) -> float:
    """Price of one unit of the line; unknown modifier/customization ids add nothing"""
    if isinstance(selection, MenuItemSelection):
        price = _menu_item_unit_price(selection)
    elif isinstance(selection, DealSelection):
        price = apply_discount(selection.item.price, selection.item.discount)
    elif isinstance(selection, SubMenuItemSelection):
        price = selection.item.price
    else:
        raise TypeError(f"Unsupported line selection: {type(selection).__name__}")
    return max(price, 0.0)


def line_extension(selection: LineSelection) -> float:
    return resolve_line_price(selection) * selection.quantity


def coerce_tip(tip_amount) -> float:
    """Tips are free-form input: negative, non-numeric or non-finite values count as 0"""
    if isinstance(tip_amount, bool):
        return 0.0
    try:
        tip = float(tip_amount)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(tip) or tip < 0:
        return 0.0
    return tip


def compute_order_totals(sub_total: float, config: BranchConfiguration, tip_amount=0) -> OrderTotals:
    """
    Compose order totals.

    Discount on total: the discount comes off the subtotal before tax and
    service charges are taken from what remains.
    Discount on tax: tax and service charges are taken from the full subtotal
    and the discount is a percentage of the tax, deducted from the total.
    """
    tip = coerce_tip(tip_amount)
    discount_percentage = config.discount_percentage
    on_total = config.is_discount_on_total

    discount_amount = 0.0
    taxable_amount = sub_total

    if on_total and discount_percentage > 0:
        discount_amount = (sub_total * discount_percentage) / 100
        taxable_amount = sub_total - discount_amount

    tax_amount = (taxable_amount * config.tax_percentage) / 100
    service_charges = (taxable_amount * config.service_charge_percentage) / 100

    if not on_total and discount_percentage > 0:
        discount_amount = (tax_amount * discount_percentage) / 100

    total_amount = taxable_amount + tax_amount + service_charges + tip - (0 if on_total else discount_amount)

    return OrderTotals(
        sub_total=sub_total,
        discount_amount=discount_amount,
        taxable_amount=taxable_amount,
        tax_amount=tax_amount,
        service_charges=service_charges,
        tip_amount=tip,
        total_amount=total_amount,
    )


def summarize_order(selections: Iterable[LineSelection], config: BranchConfiguration, tip_amount=0) -> OrderTotals:
    sub_total = sum((line_extension(s) for s in selections), 0.0)
    return compute_order_totals(sub_total, config, tip_amount)


def select_menu_item(item: CustomerMenuItem, line: OrderLineRequest) -> MenuItemSelection:
    if not item.variations:
        raise InvalidSelectionError(
            f"{item.name or 'Menu item'} doesn't have any variations to select.",
            details={'menu_item_id': item.menu_item_id},
        )
    variant_id = line.variant_id if item.find_variation(line.variant_id) else item.variations[0].id
    return MenuItemSelection(
        item=item,
        quantity=line.quantity,
        variant_id=variant_id,
        modifiers=line.modifiers,
        customizations=line.customizations,
    )


def build_selection(line: OrderLineRequest, menu: CustomerSearchMenu) -> LineSelection:
    """Resolve an inbound order line against the branch menu"""
    if line.type == 'menuItem':
        item = menu.find_menu_item(line.id)
        if item is None:
            raise InvalidSelectionError(f"Menu item {line.id} is not on this branch's menu")
        return select_menu_item(item, line)
    if line.type == 'deal':
        deal = menu.find_deal(line.id)
        if deal is None:
            raise InvalidSelectionError(f"Deal {line.id} is not on this branch's menu")
        return DealSelection(item=deal, quantity=line.quantity)
    if line.type == 'subItem':
        sub_item = menu.find_sub_menu_item(line.id)
        if sub_item is None:
            raise InvalidSelectionError(f"Sub-menu item {line.id} is not on this branch's menu")
        return SubMenuItemSelection(item=sub_item, quantity=line.quantity)
    raise InvalidSelectionError(f"Unknown item type {line.type!r}")
