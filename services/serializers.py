from rest_framework import serializers

from .models import ALL, Category, Service


class ServiceSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=50)
    name = serializers.CharField(max_length=100)
    description = serializers.CharField()
    price = serializers.IntegerField(min_value=0)
    category = serializers.ChoiceField(choices=Category.choices)
    duration = serializers.CharField(max_length=50)
    rating = serializers.FloatField(min_value=0, max_value=5)
    image_url = serializers.CharField(required=False, allow_blank=True, default="")
    popular = serializers.BooleanField(required=False, default=False)
    bestseller = serializers.BooleanField(required=False, default=False)

    def validate_id(self, value):
        service_id = (value or "").strip()
        if not service_id:
            raise serializers.ValidationError("Service id is required")
        return service_id

    def create(self, validated_data):
        return Service(**validated_data)


class ServiceCategorySerializer(serializers.Serializer):
    name = serializers.CharField()
    services = ServiceSerializer(many=True, read_only=True)


class ServiceFilterSerializer(serializers.Serializer):
    category = serializers.ChoiceField(
        choices=[ALL] + list(Category.values),
        required=False,
        default=ALL,
    )
    q = serializers.CharField(required=False, allow_blank=True, default="")
