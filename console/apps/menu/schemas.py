"""
Menu DTOs as served by the remote customer-search menu endpoint.
Field names follow the remote camelCase through aliases.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Discount(ApiModel):
    # percentage; the server keeps it within 0-100
    value: float = 0
    applies_to: Literal['total', 'line'] = 'line'


class Variation(ApiModel):
    id: int
    name: str = ''
    price: float = 0


class Modifier(ApiModel):
    id: int
    name: str = ''
    price: float = 0


class CustomizationOption(ApiModel):
    id: int
    name: str = ''
    price: float = 0


class Customization(ApiModel):
    id: int
    name: str = ''
    options: List[CustomizationOption] = Field(default_factory=list)

    def find_option(self, option_id) -> Optional[CustomizationOption]:
        return next((o for o in self.options if o.id == option_id), None)


class CustomerMenuItem(ApiModel):
    menu_item_id: int
    name: str = ''
    category_name: Optional[str] = None
    variations: List[Variation] = Field(default_factory=list)
    modifiers: List[Modifier] = Field(default_factory=list)
    customizations: List[Customization] = Field(default_factory=list)
    discount: Optional[Discount] = None

    def find_variation(self, variant_id) -> Optional[Variation]:
        return next((v for v in self.variations if v.id == variant_id), None)

    def find_modifier(self, modifier_id) -> Optional[Modifier]:
        return next((m for m in self.modifiers if m.id == modifier_id), None)

    def find_customization(self, customization_id) -> Optional[Customization]:
        return next((c for c in self.customizations if c.id == customization_id), None)


class CustomerDeal(ApiModel):
    deal_id: int
    name: str = ''
    price: float = 0
    discount: Optional[Discount] = None


class CustomerSubMenuItem(ApiModel):
    sub_menu_item_id: int
    name: str = ''
    price: float = 0


class CustomerSearchMenu(ApiModel):
    menu_items: List[CustomerMenuItem] = Field(default_factory=list)
    deals: List[CustomerDeal] = Field(default_factory=list)
    sub_menu_items: List[CustomerSubMenuItem] = Field(default_factory=list)
    currency: Optional[str] = None

    def find_menu_item(self, menu_item_id) -> Optional[CustomerMenuItem]:
        return next((i for i in self.menu_items if i.menu_item_id == menu_item_id), None)

    def find_deal(self, deal_id) -> Optional[CustomerDeal]:
        return next((d for d in self.deals if d.deal_id == deal_id), None)

    def find_sub_menu_item(self, sub_menu_item_id) -> Optional[CustomerSubMenuItem]:
        return next((s for s in self.sub_menu_items if s.sub_menu_item_id == sub_menu_item_id), None)
