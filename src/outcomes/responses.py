"""Response-family catalog.

Entries return plain :class:`~outcomes.model.Outcome` values. Besides the
informational, success and redirection codes, every error code is available
here too for handlers that return rather than raise.
"""

from __future__ import annotations

from outcomes.errors import ERROR_TABLE
from outcomes.variants import Catalog, OutcomeFamily, ResponseVariant, VariantRow

_RFC = "https://tools.ietf.org/html/"

SUCCESS_TABLE: dict[str, VariantRow] = {
    "Continue": VariantRow(
        100, _RFC + "rfc7231#section-6.2.1",
        "Everything so far is OK; the client should continue the request.",
    ),
    "SwitchingProtocols": VariantRow(
        101, _RFC + "rfc7231#section-6.2.2",
        "The server is switching to the protocol named in the Upgrade header.",
    ),
    "Processing": VariantRow(
        102, _RFC + "rfc2518#section-10.1",
        "The request was received and is being processed; no response yet.",
    ),
    "Success": VariantRow(
        200, _RFC + "rfc7231#section-6.3.1",
        "The request succeeded.",
    ),
    "Created": VariantRow(
        201, _RFC + "rfc7231#section-6.3.2",
        "The request succeeded and a new resource was created.",
    ),
    "NonAuthoritativeInformation": VariantRow(
        203, _RFC + "rfc7231#section-6.3.4",
        "The returned metadata comes from a local or third-party copy.",
    ),
    "NoContent": VariantRow(
        204, _RFC + "rfc7231#section-6.3.5",
        "There is no content to send, but the headers may be useful.",
    ),
    "ResetContent": VariantRow(
        205, _RFC + "rfc7231#section-6.3.6",
        "The user agent should reset the document that sent the request.",
    ),
    "PartialContent": VariantRow(
        206, _RFC + "rfc7233#section-4.1",
        "Only part of the resource is sent, as asked by a Range header.",
    ),
    "MultiStatus": VariantRow(
        207, _RFC + "rfc4918#section-11.1",
        "The body carries status for several resources.",
    ),
    "MultipleChoices": VariantRow(
        300, _RFC + "rfc7231#section-6.4.1",
        "The request has more than one possible response.",
    ),
    "MovedPermanently": VariantRow(
        301, _RFC + "rfc7231#section-6.4.2",
        "The resource has moved permanently to a new URI.",
    ),
    "MovedTemporarily": VariantRow(
        302, _RFC + "rfc7231#section-6.4.3",
        "The resource is temporarily under a different URI.",
    ),
    "SeeOther": VariantRow(
        303, _RFC + "rfc7231#section-6.4.4",
        "The client should GET the resource from another URI.",
    ),
    "NotModified": VariantRow(
        304, _RFC + "rfc7232#section-4.1",
        "The cached copy is still valid.",
    ),
    "TemporaryRedirect": VariantRow(
        307, _RFC + "rfc7231#section-6.4.7",
        "Repeat the request at another URI with the same method.",
    ),
    "PermanentRedirect": VariantRow(
        308, _RFC + "rfc7538#section-3",
        "The resource moved permanently; repeat with the same method.",
    ),
}

RESPONSE_TABLE: dict[str, VariantRow] = {**SUCCESS_TABLE, **ERROR_TABLE}

SUCCESS_CODES: dict[str, int] = {name: row.status_code for name, row in SUCCESS_TABLE.items()}
RESPONSE_CODES: dict[str, int] = {name: row.status_code for name, row in RESPONSE_TABLE.items()}

catalog = Catalog(OutcomeFamily.response, ResponseVariant, RESPONSE_TABLE)

__all__ = [
    "RESPONSE_CODES",
    "RESPONSE_TABLE",
    "SUCCESS_CODES",
    "SUCCESS_TABLE",
    "catalog",
    *RESPONSE_TABLE,
]


def __getattr__(name: str) -> ResponseVariant:
    variant = catalog.get(name)
    if variant is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return variant


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(RESPONSE_TABLE))
