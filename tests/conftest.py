from types import SimpleNamespace
from unittest import mock

import pytest
from rest_framework.test import APIClient

from services.catalog import get_catalog


@pytest.fixture(autouse=True)
def _fast_settings(settings):
    settings.BOOKING_ACK_DELAY = 0
    settings.OPENAI_API_KEY = ""


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def openai_client():
    """Stand-in for ``openai.OpenAI`` whose completion returns ``content``."""

    def _make(content=None, error=None):
        client = mock.Mock()
        if error is not None:
            client.chat.completions.create.side_effect = error
        else:
            message = SimpleNamespace(content=content)
            client.chat.completions.create.return_value = SimpleNamespace(
                choices=[SimpleNamespace(message=message)]
            )
        return client

    return _make


@pytest.fixture
def schedule_data():
    return {"date": "2024-01-01", "time": "09:00 - 11:00", "address": "X"}


@pytest.fixture
def contact_data():
    return {"name": "Asha Rao", "phone": "9876543210", "email": "asha@example.com", "notes": ""}
