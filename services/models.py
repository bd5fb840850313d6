from dataclasses import dataclass

from django.db import models

ALL = "All"


class Category(models.TextChoices):
    AC_SERVICES = "AC Services", "AC Services"
    PLUMBING = "Plumbing", "Plumbing"
    ELECTRICAL = "Electrical", "Electrical"
    APPLIANCES = "Appliances", "Appliances"
    SMART_HOME = "Smart Home", "Smart Home"


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    price: int
    category: str
    duration: str
    rating: float
    image_url: str = ""
    popular: bool = False
    bestseller: bool = False

    def __str__(self):
        return f"{self.name} ({self.category})"
