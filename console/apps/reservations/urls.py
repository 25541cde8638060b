from django.urls import path

from .views import ReservationView, ReservationActionView, ReservationStatusTypeView

urlpatterns = [
    path('', ReservationView.as_view()),
    path('status-types/', ReservationStatusTypeView.as_view()),
    path('<int:pk>/', ReservationView.as_view()),
    path('<int:pk>/action/', ReservationActionView.as_view()),
]
