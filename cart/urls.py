from django.urls import path
from .views import (
    CartAPIView,
    CartItemListAPIView,
    CartItemDetailAPIView,
)

urlpatterns = [
    path("", CartAPIView.as_view()),
    path("items/", CartItemListAPIView.as_view()),
    path("items/<str:service_id>/", CartItemDetailAPIView.as_view()),
]
