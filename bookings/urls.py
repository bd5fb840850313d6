from django.urls import path
from .views import (
    BookingFlowAPIView,
    BookingScheduleAPIView,
    BookingBackAPIView,
    BookingSubmitAPIView,
    BookingConfirmationAPIView,
)

urlpatterns = [
    path("", BookingFlowAPIView.as_view()),
    path("schedule/", BookingScheduleAPIView.as_view()),
    path("back/", BookingBackAPIView.as_view()),
    path("submit/", BookingSubmitAPIView.as_view()),
    path("confirmation/", BookingConfirmationAPIView.as_view()),
]
