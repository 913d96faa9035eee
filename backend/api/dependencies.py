"""Shared dependencies for API routes."""

from services.catalog import SAMPLE_CATALOG, CatalogProvider, InMemoryCatalogProvider
from services.engine.base import BaseScorer
from services.engine.registry import get_scorer

_catalog_provider: CatalogProvider | None = None


def get_catalog_provider() -> CatalogProvider:
    global _catalog_provider
    if _catalog_provider is None:
        _catalog_provider = InMemoryCatalogProvider(SAMPLE_CATALOG)
    return _catalog_provider


def get_external_scorer() -> BaseScorer | None:
    return get_scorer()
