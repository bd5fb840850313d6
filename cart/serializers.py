from rest_framework import serializers

from services.serializers import ServiceSerializer


class CartLineSerializer(serializers.Serializer):
    service = ServiceSerializer(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.IntegerField(read_only=True)


class CartSerializer(serializers.Serializer):
    items = serializers.SerializerMethodField()
    total = serializers.SerializerMethodField()
    count = serializers.SerializerMethodField()

    def get_items(self, obj):
        return CartLineSerializer(list(obj), many=True).data

    def get_total(self, obj):
        return obj.total()

    def get_count(self, obj):
        return obj.count()


class AddToCartSerializer(serializers.Serializer):
    service_id = serializers.CharField()


class QuantityDeltaSerializer(serializers.Serializer):
    delta = serializers.IntegerField()
