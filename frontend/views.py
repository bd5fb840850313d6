from django.conf import settings
from django.shortcuts import render, redirect

from bookings.flow import CONFIRMATION_KEY, BookingFlow
from bookings.models import TimeSlot
from cart.views import load_cart
from services.catalog import PREVIEW_COUNT, Catalog, get_catalog
from services.models import ALL, Category
from services.serializers import ServiceFilterSerializer


# =====================
# STOREFRONT
# =====================

def storefront(request):
    if request.session.get(CONFIRMATION_KEY):
        return redirect("booking_confirmation")

    params = ServiceFilterSerializer(data=request.GET)
    if params.is_valid():
        category = params.validated_data["category"]
        query = params.validated_data["q"]
    else:
        category, query = ALL, ""

    catalog = get_catalog()
    cart = load_cart(request)
    context = {
        "show_nav": True,
        "categories": Category.values,
        "selected_category": category,
        "query": query,
        "is_filtered": Catalog.is_filtered(category, query),
        "cart": cart,
        "cart_ids": [line.service.id for line in cart],
    }
    if context["is_filtered"]:
        context["services"] = catalog.filter(category=category, query=query)
    else:
        preview = getattr(settings, "CATALOG_PREVIEW_COUNT", PREVIEW_COUNT)
        context["groups"] = catalog.group_by_category(preview=preview)
    return render(request, "storefront.html", context)


# =====================
# BOOKING
# =====================

def booking_page(request):
    cart = load_cart(request)
    if not len(cart):
        return redirect("storefront")
    flow = BookingFlow.from_session(request.session)
    return render(request, "booking.html", {
        "show_nav": True,
        "cart": cart,
        "step": flow.step,
        "data": flow.data,
        "time_slots": TimeSlot.choices,
    })


def confirmation_page(request):
    confirmation = request.session.get(CONFIRMATION_KEY)
    if not confirmation:
        return redirect("storefront")
    return render(request, "booking_confirmation.html", {
        "show_nav": False,
        "confirmation": confirmation,
    })
