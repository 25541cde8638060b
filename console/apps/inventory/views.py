from ._views.InventoryItemView import InventoryItemView
from ._views.SupplierView import SupplierView
from ._views.InventoryCategoryView import InventoryCategoryView
from ._views.PurchaseOrderView import PurchaseOrderView, ReceivePurchaseOrderView, CancelPurchaseOrderView
from ._views.RecipeView import RecipeView, RecipeCalculatorView
from ._views.StockView import StockView, LowStockView, WastageView
