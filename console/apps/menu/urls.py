from django.urls import path

from .views import (
    MenuItemView, MenuItemStockStatusView, SubMenuItemView, MenuCategoryView,
    DealView, DiscountView, BulkDiscountView, CustomerMenuView,
)

urlpatterns = [
    path('menu-items/', MenuItemView.as_view()),
    path('menu-items/<int:pk>/', MenuItemView.as_view()),
    path('menu-items/<int:pk>/stock-status/', MenuItemStockStatusView.as_view()),
    path('sub-menu-items/', SubMenuItemView.as_view()),
    path('sub-menu-items/<int:pk>/', SubMenuItemView.as_view()),
    path('categories/', MenuCategoryView.as_view()),
    path('categories/<int:pk>/', MenuCategoryView.as_view()),
    path('deals/', DealView.as_view()),
    path('deals/<int:pk>/', DealView.as_view()),
    path('discounts/', DiscountView.as_view()),
    path('discounts/<int:pk>/', DiscountView.as_view()),
    path('bulk-discount/', BulkDiscountView.as_view()),
    path('customer-menu/<int:branch_id>/', CustomerMenuView.as_view()),
]
