from django.urls import path, include

urlpatterns = [
    path('accounts/', include('console.apps.accounts.urls')),
    path('users/', include('console.apps.users.urls')),
    path('entities/', include('console.apps.entities.urls')),
    path('branches/', include('console.apps.branches.urls')),
    path('menu/', include('console.apps.menu.urls')),
    path('inventory/', include('console.apps.inventory.urls')),
    path('orders/', include('console.apps.orders.urls')),
    path('reservations/', include('console.apps.reservations.urls')),
]
