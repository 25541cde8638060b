from django.urls import path

from .views import OrderView, OrderStatusView, OrderPreviewView

urlpatterns = [
    path('', OrderView.as_view()),
    path('preview/', OrderPreviewView.as_view()),
    path('status/', OrderStatusView.as_view()),
    path('<int:pk>/', OrderView.as_view()),
]
