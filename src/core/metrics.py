from __future__ import annotations

import logging

from prometheus_client import Counter, start_http_server

from core.config import settings

logger = logging.getLogger(__name__)

_metrics_started = False

OUTCOMES_TOTAL = Counter(
    "http_outcomes_built_total",
    "Outcomes built from named variants by family, variant, and status code.",
    ["family", "variant", "status_code"],
)
UNKNOWN_STATUS_TOTAL = Counter(
    "http_outcomes_unknown_status_total",
    "Status label lookups that fell back to the unknown label.",
    ["status_code"],
)


def start_metrics_server(port: int | None = None) -> bool:
    if not settings.metrics_enabled:
        return False
    global _metrics_started
    if _metrics_started:
        return True
    port = port or settings.metrics_port
    try:
        start_http_server(port, addr=settings.metrics_host)
    except OSError as exc:
        logger.warning("metrics_server_failed: %s", exc)
        return False
    _metrics_started = True
    logger.info("metrics_server_started port=%s", port)
    return True


def record_outcome(family: str | None, variant: str | None, status_code: int | None) -> None:
    if not settings.metrics_enabled:
        return
    OUTCOMES_TOTAL.labels(
        family=_label(family, "unknown"),
        variant=_label(variant, "unknown"),
        status_code=_label(status_code, "unknown"),
    ).inc()


def record_unknown_status(status_code: int | None) -> None:
    if not settings.metrics_enabled:
        return
    UNKNOWN_STATUS_TOTAL.labels(status_code=_label(status_code, "unknown")).inc()


def _label(value: object | None, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default
