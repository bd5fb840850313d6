"""
Service recommendation over the OpenAI chat completions API.

``recommend`` never raises: any failure (no API key, transport error, a reply
that is not the expected JSON object) is logged and answered with
``FALLBACK_EXPLANATION`` and no service.
"""

import json
import logging

from django.conf import settings
from openai import OpenAI

from services.catalog import get_catalog

from .models import Recommendation
from .serializers import RecommendationSerializer

logger = logging.getLogger(__name__)

FALLBACK_EXPLANATION = (
    "I'm having trouble connecting to the grid right now. "
    "Please browse our services manually!"
)

SYSTEM_PROMPT = "You are a structured JSON generator. Always return valid JSON only."


class RecommendationError(Exception):
    pass


def build_prompt(query, catalog):
    service_list = "\n".join(
        f"{s.id}: {s.name} ({s.category} - {s.description})" for s in catalog
    )
    return f"""You are an expert home services assistant for "ElectraNow". We offer AC Services,
Plumbing, Electrical, Appliances, and Smart Home solutions.
A user is describing a problem: "{query}".

Here is our list of services:
{service_list}

Analyze the problem and recommend the BEST matching service ID from the list.
If the user asks for something we don't strictly have but is related
(e.g. "my fridge is broken"), check the Appliances category.
If no service matches well, or the query is unrelated, use null.

Also provide a short, helpful explanation (max 2 sentences) addressing the user directly.

OUTPUT FORMAT:
{{"recommendedServiceId": "<service id or null>", "explanation": "<text>"}}
"""


def get_client():
    api_key = getattr(settings, "OPENAI_API_KEY", "")
    if not api_key:
        raise RecommendationError("OPENAI_API_KEY is not configured")
    return OpenAI(api_key=api_key, timeout=getattr(settings, "OPENAI_TIMEOUT", 30.0))


def decode_recommendation(text, catalog):
    try:
        payload = json.loads(text or "")
    except ValueError as e:
        raise RecommendationError(f"Reply is not JSON: {e}") from e

    serializer = RecommendationSerializer(data=payload, context={"catalog": catalog})
    if not serializer.is_valid():
        raise RecommendationError(f"Unexpected reply shape: {serializer.errors}")
    return serializer.save()


def recommend(text, catalog=None, client=None):
    if catalog is None:
        catalog = get_catalog()

    try:
        if client is None:
            client = get_client()
        response = client.chat.completions.create(
            model=getattr(settings, "OPENAI_MODEL", "gpt-4o-mini"),
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(text, catalog)},
            ],
            response_format={"type": "json_object"},
            temperature=0.2,
            max_tokens=300,
        )
        return decode_recommendation(response.choices[0].message.content, catalog)
    except Exception:
        logger.exception("Recommendation failed, answering with fallback")
        return Recommendation(service_id=None, explanation=FALLBACK_EXPLANATION)
