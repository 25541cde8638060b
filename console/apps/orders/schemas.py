"""Order DTOs: line selections, inbound order lines and the create-order request"""

from enum import IntEnum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field

from console.apps.menu.schemas import ApiModel, CustomerDeal, CustomerMenuItem, CustomerSubMenuItem


class OrderType(IntEnum):
    DELIVERY = 1
    TAKE_AWAY = 2
    DINE_IN = 3


class SelectedModifier(ApiModel):
    modifier_id: int
    quantity: int = Field(1, ge=1)


class SelectedCustomization(ApiModel):
    customization_id: int
    option_id: int


class MenuItemSelection(ApiModel):
    type: Literal['menuItem'] = 'menuItem'
    item: CustomerMenuItem
    quantity: int = Field(1, ge=1)
    variant_id: Optional[int] = None
    modifiers: List[SelectedModifier] = Field(default_factory=list)
    customizations: List[SelectedCustomization] = Field(default_factory=list)


class DealSelection(ApiModel):
    type: Literal['deal'] = 'deal'
    item: CustomerDeal
    quantity: int = Field(1, ge=1)


class SubMenuItemSelection(ApiModel):
    type: Literal['subItem'] = 'subItem'
    item: CustomerSubMenuItem
    quantity: int = Field(1, ge=1)


LineSelection = Annotated[
    Union[MenuItemSelection, DealSelection, SubMenuItemSelection],
    Field(discriminator='type'),
]


class OrderLineRequest(ApiModel):
    """One line as posted to the console: the item is referenced by id"""
    type: Literal['menuItem', 'deal', 'subItem']
    id: int
    quantity: int = Field(1, ge=1)
    variant_id: Optional[int] = None
    modifiers: List[SelectedModifier] = Field(default_factory=list)
    customizations: List[SelectedCustomization] = Field(default_factory=list)


class OrderDraft(ApiModel):
    """Body of the preview and create endpoints"""
    branch_id: int
    items: List[OrderLineRequest] = Field(default_factory=list)
    # free-form; pricing treats anything negative or non-numeric as 0
    tip_amount: Any = 0
    location_id: Optional[int] = None
    order_type: OrderType = OrderType.DINE_IN
    special_instruction: str = ''
    allergen_ids: List[int] = Field(default_factory=list)
    delivery_details: Optional[dict] = None
    pickup_details: Optional[dict] = None


class CreateOrderItem(ApiModel):
    menu_item_id: int
    variant_id: int
    quantity: int
    modifiers: List[SelectedModifier] = Field(default_factory=list)
    customizations: List[SelectedCustomization] = Field(default_factory=list)


class CreateOrderPackage(ApiModel):
    menu_package_id: int
    quantity: int


class CreateOrderRequest(ApiModel):
    branch_id: int
    location_id: Optional[int] = None
    device_info: str = 'POS-Web'
    tip_amount: float = 0
    username: str = 'admin'
    order_type: OrderType = OrderType.DINE_IN
    special_instruction: str = ''
    order_items: List[CreateOrderItem] = Field(default_factory=list)
    order_packages: List[CreateOrderPackage] = Field(default_factory=list)
    delivery_details: Optional[dict] = None
    pickup_details: Optional[dict] = None
    split_bills: Optional[list] = None
    allergen_ids: List[int] = Field(default_factory=list)

    def to_api(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)
