"""
Session-scoped shopping cart.

A cart is an ordered list of lines, one per service. It is rebuilt from the
session at the start of a request and written back with ``save()``; nothing
is shared between sessions.
"""

from dataclasses import dataclass

SESSION_KEY = "cart"


@dataclass
class CartLine:
    service: object
    quantity: int = 1

    @property
    def subtotal(self):
        return self.service.price * self.quantity


class Cart:
    def __init__(self, lines=None):
        self._lines = list(lines or [])

    @classmethod
    def from_session(cls, session, catalog):
        lines = []
        seen = set()
        for entry in session.get(SESSION_KEY, []):
            try:
                service_id, quantity = entry
            except (TypeError, ValueError):
                continue
            service = catalog.get(service_id)
            if service is None or service_id in seen:
                continue
            if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
                continue
            seen.add(service_id)
            lines.append(CartLine(service=service, quantity=quantity))
        return cls(lines)

    def save(self, session):
        session[SESSION_KEY] = [[line.service.id, line.quantity] for line in self._lines]

    def __iter__(self):
        return iter(self._lines)

    def __len__(self):
        return len(self._lines)

    def __contains__(self, service_id):
        return self.get(service_id) is not None

    def get(self, service_id):
        for line in self._lines:
            if line.service.id == service_id:
                return line
        return None

    def add_item(self, service):
        """
        Add one unit of ``service``. Returns True when the cart was empty,
        which is the signal for the storefront to reveal the cart drawer.
        """
        was_empty = not self._lines
        line = self.get(service.id)
        if line:
            line.quantity += 1
        else:
            self._lines.append(CartLine(service=service, quantity=1))
        return was_empty

    def remove_item(self, service_id):
        self._lines = [line for line in self._lines if line.service.id != service_id]

    def set_quantity_delta(self, service_id, delta):
        # Never drops a line; removal is explicit via remove_item.
        line = self.get(service_id)
        if line is None or not delta:
            return False
        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            return False
        line.quantity = new_quantity
        return True

    def clear(self):
        self._lines = []

    def total(self):
        return sum(line.subtotal for line in self._lines)

    def count(self):
        return sum(line.quantity for line in self._lines)

    def snapshot(self):
        return [
            {
                "service_id": line.service.id,
                "name": line.service.name,
                "price": line.service.price,
                "quantity": line.quantity,
                "subtotal": line.subtotal,
            }
            for line in self._lines
        ]
