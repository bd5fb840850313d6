from django.urls import path, include


urlpatterns = [
    # App APIs
    path('api/services/', include('services.urls')),
    path('api/cart/', include('cart.urls')),
    path('api/bookings/', include('bookings.urls')),
    path('api/chat/', include('assistant.urls')),

    # Frontend
    path("", include("frontend.urls")),
]
