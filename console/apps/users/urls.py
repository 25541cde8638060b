from django.urls import path

from .views import UserView, RoleView, ProfileView

urlpatterns = [
    path('', UserView.as_view()),
    path('roles/', RoleView.as_view()),
    path('profile/', ProfileView.as_view()),
    path('<int:pk>/', UserView.as_view()),
]
