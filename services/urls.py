from django.urls import path
from .views import (
    ServiceListAPIView,
    ServiceCategoryListAPIView,
    ServiceDetailAPIView,
)

urlpatterns = [
    path('', ServiceListAPIView.as_view()),
    path('categories/', ServiceCategoryListAPIView.as_view()),
    path("<str:service_id>/", ServiceDetailAPIView.as_view()),
]
