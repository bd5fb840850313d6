from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from .catalog import PREVIEW_COUNT, get_catalog
from .serializers import ServiceCategorySerializer, ServiceFilterSerializer, ServiceSerializer


class ServiceListAPIView(APIView):

    def get(self, request):
        params = ServiceFilterSerializer(data=request.query_params)
        if not params.is_valid():
            return Response(params.errors, status=status.HTTP_400_BAD_REQUEST)

        services = get_catalog().filter(
            category=params.validated_data["category"],
            query=params.validated_data["q"],
        )
        serializer = ServiceSerializer(services, many=True)
        return Response(serializer.data)


class ServiceCategoryListAPIView(APIView):

    def get(self, request):
        preview = getattr(settings, "CATALOG_PREVIEW_COUNT", PREVIEW_COUNT)
        groups = get_catalog().group_by_category(preview=preview)
        serializer = ServiceCategorySerializer(
            [{"name": name, "services": services} for name, services in groups.items()],
            many=True,
        )
        return Response(serializer.data)


class ServiceDetailAPIView(APIView):

    def get(self, request, service_id):
        service = get_catalog().get(service_id)
        if service is None:
            return Response({"error": "Service not found"}, status=404)
        return Response(ServiceSerializer(service).data)
