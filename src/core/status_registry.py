from __future__ import annotations

import http
from typing import Mapping

# Unofficial codes carried by the common status-text tables but absent from
# http.HTTPStatus.
_SUPPLEMENTAL_LABELS = {
    419: "Insufficient Space on Resource",
    420: "Method Failure",
}


class UnknownStatusError(LookupError):
    def __init__(self, status_code: object) -> None:
        super().__init__(f"status_code_not_registered: {status_code!r}")
        self.code = "status_code_not_registered"
        self.status_code = status_code


def standard_labels() -> dict[int, str]:
    labels = {status.value: status.phrase for status in http.HTTPStatus}
    for code, label in _SUPPLEMENTAL_LABELS.items():
        labels.setdefault(code, label)
    return labels


class StatusRegistry:
    """Maps integer status codes to their canonical text label."""

    def __init__(self, labels: Mapping[int, str] | None = None) -> None:
        self._labels: dict[int, str] = dict(labels if labels is not None else standard_labels())

    def lookup(self, status_code: int) -> str:
        try:
            return self._labels[status_code]
        except (KeyError, TypeError) as exc:
            raise UnknownStatusError(status_code) from exc

    def register(self, status_code: int, label: str) -> None:
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            raise TypeError("status_code must be an int")
        if not label or not label.strip():
            raise ValueError("label must be non-empty")
        self._labels[status_code] = label

    def __contains__(self, status_code: object) -> bool:
        try:
            return status_code in self._labels
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._labels)


default_registry = StatusRegistry()


def lookup(status_code: int) -> str:
    return default_registry.lookup(status_code)
