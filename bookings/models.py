from dataclasses import dataclass, field
from datetime import datetime

from django.db import models


class Step(models.TextChoices):
    SCHEDULE = "SCHEDULE", "Schedule Service"
    CONTACT = "CONTACT", "Contact Details"
    SUBMITTED = "SUBMITTED", "Submitted"


class TimeSlot(models.TextChoices):
    SLOT_09_11 = "09:00 - 11:00", "09:00 AM - 11:00 AM"
    SLOT_11_13 = "11:00 - 13:00", "11:00 AM - 01:00 PM"
    SLOT_14_16 = "14:00 - 16:00", "02:00 PM - 04:00 PM"
    SLOT_16_18 = "16:00 - 18:00", "04:00 PM - 06:00 PM"


@dataclass
class BookingDetails:
    name: str
    email: str
    phone: str
    address: str
    date: str
    time: str
    notes: str = ""


@dataclass
class Booking:
    reference: str
    details: BookingDetails
    items: list = field(default_factory=list)
    total: int = 0
    count: int = 0
    created_at: datetime = None

    def __str__(self):
        return f"Booking #{self.reference}"
