"""
Static service catalog.

The catalog is read once from a JSON file (``settings.CATALOG_PATH``) and
kept in memory for the lifetime of the process. Records are validated with
``ServiceSerializer`` so a broken data file fails at startup instead of on
the first request.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from django.conf import settings

from .models import ALL, Category
from .serializers import ServiceSerializer

logger = logging.getLogger(__name__)

PREVIEW_COUNT = 4


class CatalogError(Exception):
    pass


class Catalog:
    def __init__(self, services):
        self._services = tuple(services)
        self._by_id = {}
        for service in self._services:
            if service.id in self._by_id:
                raise CatalogError(f"Duplicate service id: {service.id}")
            self._by_id[service.id] = service

    def __iter__(self):
        return iter(self._services)

    def __len__(self):
        return len(self._services)

    def __contains__(self, service_id):
        return service_id in self._by_id

    def all(self):
        return list(self._services)

    def get(self, service_id):
        return self._by_id.get(service_id)

    @staticmethod
    def is_filtered(category=ALL, query=""):
        return category != ALL or bool((query or "").strip())

    def filter(self, category=ALL, query=""):
        """
        Services in ``category`` (or every category for ``"All"``) whose name
        or description contains ``query``, case-insensitively. Catalog order
        is kept.
        """
        needle = (query or "").strip().lower()
        return [
            s for s in self._services
            if (category == ALL or s.category == category)
            and (
                not needle
                or needle in s.name.lower()
                or needle in s.description.lower()
            )
        ]

    def group_by_category(self, preview=PREVIEW_COUNT):
        groups = {}
        for category in Category.values:
            groups[category] = [s for s in self._services if s.category == category][:preview]
        return groups


def load_catalog(path):
    path = Path(path)
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    if not isinstance(records, list):
        raise CatalogError(f"Catalog {path} must contain a list of services")

    services = []
    for index, record in enumerate(records):
        serializer = ServiceSerializer(data=record)
        if not serializer.is_valid():
            raise CatalogError(f"Invalid service at position {index}: {serializer.errors}")
        services.append(serializer.save())

    catalog = Catalog(services)
    logger.info("Loaded %d services from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog():
    return load_catalog(settings.CATALOG_PATH)
