"""
Order composition: resolves posted lines against the branch menu, prices them
and builds the create-order request for the remote API.
"""

from dataclasses import dataclass
from typing import List

from console.apps.branches.schemas import BranchConfiguration
from console.apps.branches.services import branch_currency, load_branch_configuration
from console.apps.menu.services import load_customer_menu
from console.apps.orders.pricing import (
    OrderTotals,
    build_selection,
    coerce_tip,
    line_extension,
    resolve_line_price,
    summarize_order,
)
from console.apps.orders.schemas import (
    CreateOrderItem,
    CreateOrderPackage,
    CreateOrderRequest,
    DealSelection,
    MenuItemSelection,
    OrderDraft,
    SubMenuItemSelection,
)


@dataclass
class PricedOrder:
    draft: OrderDraft
    selections: List
    config: BranchConfiguration
    totals: OrderTotals
    currency: str

    def lines(self) -> List[dict]:
        return [
            {
                'type': selection.type,
                'id': line.id,
                'name': selection.item.name,
                'quantity': selection.quantity,
                'unit_price': resolve_line_price(selection),
                'line_total': line_extension(selection),
            }
            for line, selection in zip(self.draft.items, self.selections)
        ]


def price_order(repository, cache, draft: OrderDraft, default_currency: str) -> PricedOrder:
    """
    Recompute the order from scratch against the current menu and branch policy.

    Raises InvalidSelectionError for lines that are not on the menu,
    BranchConfigurationError when the branch policy is unusable and ApiError
    when either record cannot be fetched.
    """
    menu = load_customer_menu(repository, cache, draft.branch_id)
    config = load_branch_configuration(repository, cache, draft.branch_id)
    selections = [build_selection(line, menu) for line in draft.items]
    totals = summarize_order(selections, config, draft.tip_amount)
    currency = menu.currency or branch_currency(repository, cache, draft.branch_id, default_currency)
    return PricedOrder(draft=draft, selections=selections, config=config, totals=totals, currency=currency)


def build_create_order_request(priced: PricedOrder, username: str) -> CreateOrderRequest:
    """Deals go out as order packages; sub-menu items as order items without a variant"""
    order_items = []
    sub_items = []
    order_packages = []
    for selection in priced.selections:
        if isinstance(selection, MenuItemSelection):
            order_items.append(CreateOrderItem(
                menu_item_id=selection.item.menu_item_id,
                variant_id=selection.variant_id,
                quantity=selection.quantity,
                modifiers=selection.modifiers,
                customizations=selection.customizations,
            ))
        elif isinstance(selection, SubMenuItemSelection):
            sub_items.append(CreateOrderItem(
                menu_item_id=selection.item.sub_menu_item_id,
                variant_id=0,
                quantity=selection.quantity,
            ))
        elif isinstance(selection, DealSelection):
            order_packages.append(CreateOrderPackage(
                menu_package_id=selection.item.deal_id,
                quantity=selection.quantity,
            ))

    draft = priced.draft
    return CreateOrderRequest(
        branch_id=draft.branch_id,
        location_id=draft.location_id,
        tip_amount=coerce_tip(draft.tip_amount),
        username=username,
        order_type=draft.order_type,
        special_instruction=draft.special_instruction,
        order_items=order_items + sub_items,
        order_packages=order_packages,
        delivery_details=draft.delivery_details,
        pickup_details=draft.pickup_details,
        allergen_ids=draft.allergen_ids,
    )
