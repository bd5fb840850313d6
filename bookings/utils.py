import logging
import time

from django.conf import settings

from .models import Booking
from .signals import booking_submitted

logger = logging.getLogger(__name__)


def dispatch_booking(booking):
    """
    Hand the booking to the notification receivers, then wait for the
    simulated acknowledgment. A failing receiver is logged and never stops
    the submission.
    """
    responses = booking_submitted.send_robust(sender=Booking, booking=booking)
    for receiver, result in responses:
        if isinstance(result, Exception):
            logger.error(
                "Booking %s notification failed in %r",
                booking.reference,
                receiver,
                exc_info=result,
            )

    delay = float(getattr(settings, "BOOKING_ACK_DELAY", 1.0))
    if delay > 0:
        time.sleep(delay)
