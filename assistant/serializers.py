import logging

from rest_framework import serializers

from .models import Recommendation, Role

logger = logging.getLogger(__name__)


class RecommendationSerializer(serializers.Serializer):
    """Decodes the model's JSON reply: ``{recommendedServiceId, explanation}``."""

    recommendedServiceId = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        default=None,
    )
    explanation = serializers.CharField()

    def validate_recommendedServiceId(self, value):
        if not value:
            return None
        catalog = self.context.get("catalog")
        if catalog is not None and value not in catalog:
            logger.warning("Model recommended unknown service id %r", value)
            return None
        return value

    def create(self, validated_data):
        return Recommendation(
            service_id=validated_data.get("recommendedServiceId"),
            explanation=validated_data["explanation"],
        )


class ChatMessageSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices)
    text = serializers.CharField()
    service_id = serializers.CharField(allow_null=True)


class ChatRequestSerializer(serializers.Serializer):
    message = serializers.CharField(max_length=1000)


class ChatBookSerializer(serializers.Serializer):
    service_id = serializers.CharField()
