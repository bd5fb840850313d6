"""
Two-step booking flow.

    SCHEDULE --advance--> CONTACT --submit--> SUBMITTED
        ^                   |                    |
        +------back---------+                    |
        +-----------------(acknowledged)---------+

Validation failures leave the flow where it was. A successful submission
clears the cart and puts the flow back on SCHEDULE for the next booking.
"""

import uuid

from django.utils import timezone

from .models import Booking, BookingDetails, Step
from .serializers import ContactSerializer, ScheduleSerializer
from .utils import dispatch_booking

SESSION_KEY = "booking"
CONFIRMATION_KEY = "booking_confirmation"

FIELDS = ("name", "email", "phone", "address", "date", "time", "notes")


class BookingFlowError(Exception):
    pass


class BookingFlow:
    def __init__(self, step=Step.SCHEDULE, data=None):
        self.step = Step(step)
        self.data = {k: v for k, v in (data or {}).items() if k in FIELDS}

    @classmethod
    def from_session(cls, session):
        raw = session.get(SESSION_KEY) or {}
        step = raw.get("step")
        if step not in (Step.SCHEDULE, Step.CONTACT):
            step = Step.SCHEDULE
        data = raw.get("data")
        if not isinstance(data, dict):
            data = {}
        return cls(step=step, data={k: v for k, v in data.items() if isinstance(v, str)})

    def save(self, session):
        session[SESSION_KEY] = {"step": self.step.value, "data": dict(self.data)}

    def reset(self):
        self.step = Step.SCHEDULE
        self.data = {}

    def advance(self, data):
        if self.step != Step.SCHEDULE:
            raise BookingFlowError(f"Cannot schedule from step {self.step.label}")

        serializer = ScheduleSerializer(data=data)
        if not serializer.is_valid():
            return False, serializer.errors

        self.data.update(serializer.validated_data)
        self.step = Step.CONTACT
        return True, None

    def back(self):
        if self.step != Step.CONTACT:
            raise BookingFlowError(f"Cannot go back from step {self.step.label}")
        self.step = Step.SCHEDULE

    def submit(self, data, cart, dispatch=dispatch_booking):
        if self.step != Step.CONTACT:
            raise BookingFlowError(f"Cannot submit from step {self.step.label}")
        if not len(cart):
            raise BookingFlowError("Your cart is empty")

        serializer = ContactSerializer(data=data)
        if not serializer.is_valid():
            return None, serializer.errors

        self.data.update(serializer.validated_data)
        booking = Booking(
            reference=uuid.uuid4().hex[:8].upper(),
            details=BookingDetails(**{f: self.data.get(f, "") for f in FIELDS}),
            items=cart.snapshot(),
            total=cart.total(),
            count=cart.count(),
            created_at=timezone.now(),
        )
        self.step = Step.SUBMITTED

        dispatch(booking)

        cart.clear()
        self.reset()
        return booking, None
