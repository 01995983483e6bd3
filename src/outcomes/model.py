from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from core.metrics import record_unknown_status
from core.status_registry import StatusRegistry, default_registry

logger = logging.getLogger(__name__)

UNKNOWN_STATUS = "Unknown"


class InvalidInputError(ValueError):
    def __init__(self, code: str, detail: str | None = None) -> None:
        super().__init__(detail or code)
        self.code = code
        self.detail = detail


class OutcomeOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    status_code: StrictInt = Field(..., alias="statusCode")
    message: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class Outcome:
    status_code: int
    status: str
    message: str

    def __post_init__(self) -> None:
        if self.status_code is None:
            raise InvalidInputError("missing_status_code")
        if not isinstance(self.status_code, int) or isinstance(self.status_code, bool):
            raise InvalidInputError("invalid_status_code", f"invalid_status_code: {self.status_code!r}")
        if not isinstance(self.status, str) or not self.status:
            raise InvalidInputError("empty_status")
        if not isinstance(self.message, str) or not self.message:
            raise InvalidInputError("empty_message")


def resolve_status(status_code: int, registry: StatusRegistry | None = None) -> str:
    """Return the registry label for ``status_code`` or ``UNKNOWN_STATUS``.

    Every lookup failure is treated the same way, whether the code is not
    registered or the registry itself misbehaves.
    """
    if registry is None:
        registry = default_registry
    try:
        label = registry.lookup(status_code)
    except Exception as exc:
        logger.debug("status_lookup_failed code=%s: %s", status_code, exc)
        record_unknown_status(status_code)
        return UNKNOWN_STATUS
    if not isinstance(label, str) or not label:
        record_unknown_status(status_code)
        return UNKNOWN_STATUS
    return label


def construct(
    status_code: int | None = None,
    message: str | None = None,
    status: str | None = None,
    *,
    registry: StatusRegistry | None = None,
) -> Outcome:
    if status_code is None:
        raise InvalidInputError("missing_status_code")
    options = _validate_options(
        {"status_code": status_code, "message": message, "status": status}
    )
    return build_outcome(options, registry=registry)


def construct_from(
    options: Mapping[str, Any],
    *,
    registry: StatusRegistry | None = None,
) -> Outcome:
    """Build an Outcome from an options mapping (``statusCode`` or ``status_code``)."""
    if options.get("status_code", options.get("statusCode")) is None:
        raise InvalidInputError("missing_status_code")
    return build_outcome(_validate_options(options), registry=registry)


def build_outcome(options: OutcomeOptions, *, registry: StatusRegistry | None = None) -> Outcome:
    # status has to be settled first; message falls back to it.
    status = options.status or resolve_status(options.status_code, registry)
    message = options.message or status
    return Outcome(status_code=options.status_code, status=status, message=message)


def _validate_options(payload: Mapping[str, Any]) -> OutcomeOptions:
    try:
        return OutcomeOptions.model_validate(dict(payload))
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        raise InvalidInputError("invalid_options", f"invalid_options: {', '.join(fields)}") from exc
