import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with ``booking=<Booking>`` once the customer confirms a booking.
booking_submitted = Signal()


@receiver(booking_submitted)
def booking_notifications(sender, booking, **kwargs):
    details = booking.details
    logger.info(
        "Booking %s submitted: %d item(s), total %d, %s %s, phone %s",
        booking.reference,
        booking.count,
        booking.total,
        details.date,
        details.time,
        details.phone,
    )
