from django.urls import path
from .views import ChatAPIView, ChatBookAPIView

urlpatterns = [
    path("", ChatAPIView.as_view()),
    path("book/", ChatBookAPIView.as_view()),
]
