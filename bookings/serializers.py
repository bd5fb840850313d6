import re
from datetime import date

from rest_framework import serializers

from .models import TimeSlot

SCHEDULE_FIELDS = ("date", "time", "address")


def normalize_phone(phone: str) -> str:
    digits = re.sub(r"\D", "", phone or "")
    if len(digits) == 12 and digits.startswith("91"):
        digits = digits[2:]
    return digits


def validate_phone(phone: str) -> str:
    digits = normalize_phone(phone)
    if len(digits) != 10:
        raise serializers.ValidationError("Please enter a valid 10 digit number")
    return digits


class ScheduleSerializer(serializers.Serializer):
    date = serializers.CharField(required=False, allow_blank=True, default="")
    time = serializers.CharField(required=False, allow_blank=True, default="")
    address = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_date(self, value):
        if not value:
            return value
        try:
            return date.fromisoformat(value).isoformat()
        except ValueError:
            raise serializers.ValidationError("Enter a valid date (YYYY-MM-DD)")

    def validate_time(self, value):
        if value and value not in TimeSlot.values:
            raise serializers.ValidationError("Select a valid time slot")
        return value

    def validate(self, attrs):
        if not all(attrs.get(f) for f in SCHEDULE_FIELDS):
            raise serializers.ValidationError("Please fill in all fields.")
        return attrs


class ContactSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    phone = serializers.CharField()
    email = serializers.EmailField()
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_phone(self, value):
        return validate_phone(value)


class BookingDetailsSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    address = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    time_label = serializers.SerializerMethodField()
    notes = serializers.CharField()

    def get_time_label(self, obj):
        try:
            return TimeSlot(obj.time).label
        except ValueError:
            return obj.time


class BookingItemSerializer(serializers.Serializer):
    service_id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    quantity = serializers.IntegerField()
    subtotal = serializers.IntegerField()


class BookingSerializer(serializers.Serializer):
    reference = serializers.CharField()
    details = BookingDetailsSerializer()
    items = BookingItemSerializer(many=True)
    total = serializers.IntegerField()
    count = serializers.IntegerField()
    created_at = serializers.DateTimeField()


class BookingConfirmationSerializer(serializers.Serializer):
    reference = serializers.CharField()
    date = serializers.CharField(source="details.date")
    time = serializers.CharField(source="details.time")
    phone = serializers.CharField(source="details.phone")
    email = serializers.CharField(source="details.email")
    total = serializers.IntegerField()
