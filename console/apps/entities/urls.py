from django.urls import path

from .views import EntityView, EntityPrimaryColorView

urlpatterns = [
    path('', EntityView.as_view()),
    path('<int:pk>/', EntityView.as_view()),
    path('<int:pk>/primary-color/', EntityPrimaryColorView.as_view()),
]
