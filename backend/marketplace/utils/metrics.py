"""Prometheus metrics configuration"""

from prometheus_client import Counter, Info
from prometheus_fastapi_instrumentator import Instrumentator

from ..config import settings

# Application info
app_info = Info('marketplace', 'Marketplace Listing Service Information')
app_info.info({
    'version': settings.VERSION,
    'service': 'marketplace-backend'
})

# Listing metrics
items_created_total = Counter(
    'items_created_total',
    'Total items created',
    ['category_source']
)

categories_created_total = Counter(
    'categories_created_total',
    'Total categories created'
)

# Image metrics
images_stored_total = Counter(
    'images_stored_total',
    'Total images written to the image store'
)

image_fallbacks_total = Counter(
    'image_fallbacks_total',
    'Image requests answered with the default image'
)


def setup_metrics(app):
    """
    Setup Prometheus metrics for FastAPI app

    Exposed on /metrics when the ENABLE_METRICS env var is "true".

    Args:
        app: FastAPI application instance
    """
    instrumentator = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        excluded_handlers=["/metrics"],
        env_var_name="ENABLE_METRICS",
    )

    instrumentator.instrument(app).expose(app, endpoint="/metrics")

    return instrumentator


def record_item_created(category_source: str):
    """Record item creation; category_source is "text" or "category_id" """
    items_created_total.labels(category_source=category_source).inc()


def record_category_created():
    categories_created_total.inc()


def record_image_stored():
    images_stored_total.inc()


def record_image_fallback():
    image_fallbacks_total.inc()
