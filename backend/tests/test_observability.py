"""Tests for logging and metrics configuration"""

import json
import logging

from prometheus_client import REGISTRY

from marketplace.config import settings
from marketplace.utils.logging import CustomJsonFormatter
from marketplace.utils import metrics  # noqa: F401


def test_app_info_reports_configured_version():
    value = REGISTRY.get_sample_value(
        "marketplace_info",
        {"version": settings.VERSION, "service": "marketplace-backend"}
    )
    assert value == 1.0


def test_json_formatter_adds_service_fields():
    formatter = CustomJsonFormatter("%(levelname)s %(name)s %(message)s")
    record = logging.LogRecord("uvicorn.error", logging.INFO, __file__, 1, "started", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["service"] == settings.PROJECT_NAME
    assert payload["logger_name"] == "uvicorn.error"
    assert payload["message"] == "started"
