from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from cart.views import load_cart

from .flow import CONFIRMATION_KEY, BookingFlow, BookingFlowError
from .models import TimeSlot
from .serializers import BookingConfirmationSerializer, BookingSerializer


def _flow_state(flow, cart):
    return {
        "step": flow.step.value,
        "step_label": flow.step.label,
        "data": flow.data,
        "total": cart.total(),
        "count": cart.count(),
        "time_slots": [{"value": value, "label": label} for value, label in TimeSlot.choices],
    }


class BookingFlowAPIView(APIView):

    def get(self, request):
        flow = BookingFlow.from_session(request.session)
        return Response(_flow_state(flow, load_cart(request)))


class BookingScheduleAPIView(APIView):

    def post(self, request):
        flow = BookingFlow.from_session(request.session)
        try:
            ok, errors = flow.advance(request.data)
        except BookingFlowError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if not ok:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        flow.save(request.session)
        return Response(_flow_state(flow, load_cart(request)))


class BookingBackAPIView(APIView):

    def post(self, request):
        flow = BookingFlow.from_session(request.session)
        try:
            flow.back()
        except BookingFlowError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        flow.save(request.session)
        return Response(_flow_state(flow, load_cart(request)))


class BookingSubmitAPIView(APIView):

    def post(self, request):
        flow = BookingFlow.from_session(request.session)
        cart = load_cart(request)
        try:
            booking, errors = flow.submit(request.data, cart)
        except BookingFlowError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if errors:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        cart.save(request.session)
        flow.save(request.session)
        confirmation = BookingConfirmationSerializer(booking).data
        request.session[CONFIRMATION_KEY] = dict(confirmation)

        return Response(
            {
                "message": "Booking confirmed",
                "booking": BookingSerializer(booking).data,
                "confirmation": confirmation,
            },
            status=status.HTTP_201_CREATED
        )


class BookingConfirmationAPIView(APIView):

    def get(self, request):
        confirmation = request.session.get(CONFIRMATION_KEY)
        if not confirmation:
            return Response({"error": "No booking to confirm"}, status=404)
        return Response(confirmation)

    def delete(self, request):
        request.session.pop(CONFIRMATION_KEY, None)
        return Response({"message": "Confirmation dismissed"})
