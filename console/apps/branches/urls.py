from django.urls import path

from .views import BranchView, BranchConfigurationView, TableView

urlpatterns = [
    path('', BranchView.as_view()),
    path('<int:branch_id>/configuration/', BranchConfigurationView.as_view()),
    path('<int:branch_id>/tables/', TableView.as_view()),
]
