from django.urls import path
from .views import storefront, booking_page, confirmation_page

urlpatterns = [
    path("", storefront, name="storefront"),
    path("book/", booking_page, name="booking"),
    path("booking/confirmation/", confirmation_page, name="booking_confirmation"),
]
