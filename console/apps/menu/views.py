from ._views.MenuItemView import MenuItemView, MenuItemStockStatusView
from ._views.SubMenuItemView import SubMenuItemView
from ._views.MenuCategoryView import MenuCategoryView
from ._views.DealView import DealView
from ._views.DiscountView import DiscountView, BulkDiscountView
from ._views.CustomerMenuView import CustomerMenuView
