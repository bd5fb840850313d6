from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from services.catalog import get_catalog

from .cart import Cart
from .serializers import AddToCartSerializer, CartSerializer, QuantityDeltaSerializer


def load_cart(request):
    return Cart.from_session(request.session, get_catalog())


class CartAPIView(APIView):

    def get(self, request):
        cart = load_cart(request)
        return Response(CartSerializer(cart).data)

    def delete(self, request):
        cart = load_cart(request)
        cart.clear()
        cart.save(request.session)
        return Response(CartSerializer(cart).data)


class CartItemListAPIView(APIView):

    def post(self, request):
        serializer = AddToCartSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        service = get_catalog().get(serializer.validated_data["service_id"])
        if service is None:
            return Response({"error": "Service not found"}, status=404)

        cart = load_cart(request)
        reveal = cart.add_item(service)
        cart.save(request.session)

        data = CartSerializer(cart).data
        data["reveal_cart"] = reveal
        return Response(data, status=status.HTTP_200_OK)


class CartItemDetailAPIView(APIView):

    def patch(self, request, service_id):
        serializer = QuantityDeltaSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        cart = load_cart(request)
        changed = cart.set_quantity_delta(service_id, serializer.validated_data["delta"])
        cart.save(request.session)

        data = CartSerializer(cart).data
        data["changed"] = changed
        return Response(data)

    def delete(self, request, service_id):
        cart = load_cart(request)
        cart.remove_item(service_id)
        cart.save(request.session)
        return Response(CartSerializer(cart).data)
