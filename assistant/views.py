import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from cart.serializers import CartSerializer
from cart.views import load_cart
from services.catalog import get_catalog

from .chat import ChatSession
from .serializers import ChatBookSerializer, ChatMessageSerializer, ChatRequestSerializer

logger = logging.getLogger(__name__)


class ChatAPIView(APIView):

    def get(self, request):
        chat = ChatSession.from_session(request.session)
        return Response({"messages": ChatMessageSerializer(chat.messages, many=True).data})

    def post(self, request):
        serializer = ChatRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        chat = ChatSession.from_session(request.session)
        replies = chat.send(serializer.validated_data["message"])
        chat.save(request.session)

        return Response({
            "replies": ChatMessageSerializer(replies, many=True).data,
            "messages": ChatMessageSerializer(chat.messages, many=True).data,
        })

    def delete(self, request):
        chat = ChatSession.from_session(request.session)
        chat.reset()
        chat.save(request.session)
        return Response({"messages": ChatMessageSerializer(chat.messages, many=True).data})


class ChatBookAPIView(APIView):

    def post(self, request):
        serializer = ChatBookSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        service_id = serializer.validated_data["service_id"]
        chat = ChatSession.from_session(request.session)
        if service_id not in chat.recommended_ids():
            return Response(
                {"error": "Service was not recommended in this chat"},
                status=status.HTTP_400_BAD_REQUEST
            )

        service = get_catalog().get(service_id)
        if service is None:
            return Response({"error": "Service not found"}, status=404)

        cart = load_cart(request)
        reveal = cart.add_item(service)
        cart.save(request.session)
        logger.info("Added %s to cart from chat recommendation", service.id)

        data = CartSerializer(cart).data
        data["reveal_cart"] = reveal
        return Response(data)
