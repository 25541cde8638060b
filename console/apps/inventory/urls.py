from django.urls import path

from .views import (
    InventoryItemView, SupplierView, InventoryCategoryView,
    PurchaseOrderView, ReceivePurchaseOrderView, CancelPurchaseOrderView,
    RecipeView, RecipeCalculatorView, StockView, LowStockView, WastageView,
)

urlpatterns = [
    path('items/', InventoryItemView.as_view()),
    path('items/<int:pk>/', InventoryItemView.as_view()),
    path('stock/', StockView.as_view()),
    path('low-stock/', LowStockView.as_view()),
    path('wastage/', WastageView.as_view()),
    path('suppliers/', SupplierView.as_view()),
    path('suppliers/<int:pk>/', SupplierView.as_view()),
    path('categories/', InventoryCategoryView.as_view()),
    path('categories/<int:pk>/', InventoryCategoryView.as_view()),
    path('purchase-orders/', PurchaseOrderView.as_view()),
    path('purchase-orders/<int:pk>/', PurchaseOrderView.as_view()),
    path('purchase-orders/<int:pk>/receive/', ReceivePurchaseOrderView.as_view()),
    path('purchase-orders/<int:pk>/cancel/', CancelPurchaseOrderView.as_view()),
    path('recipes/', RecipeView.as_view()),
    path('recipes/calculate/', RecipeCalculatorView.as_view()),
    path('recipes/<int:pk>/', RecipeView.as_view()),
]
