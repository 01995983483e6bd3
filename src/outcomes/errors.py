"""Error-family catalog.

Each entry is an :class:`~outcomes.variants.ErrorVariant`; calling one returns
an :class:`~outcomes.failures.HttpError` ready to be raised::

    from outcomes.errors import NotFound

    raise NotFound("User not found")
"""

from __future__ import annotations

from outcomes.variants import Catalog, ErrorVariant, OutcomeFamily, VariantRow

_RFC = "https://tools.ietf.org/html/"

ERROR_TABLE: dict[str, VariantRow] = {
    "BadGateway": VariantRow(
        502, _RFC + "rfc7231#section-6.6.3",
        "A gateway or proxy received an invalid response from the upstream server.",
    ),
    "BadRequest": VariantRow(
        400, _RFC + "rfc7231#section-6.5.1",
        "The server cannot process the request because it is malformed.",
    ),
    "Conflict": VariantRow(
        409, _RFC + "rfc7231#section-6.5.8",
        "The request conflicts with the current state of the target resource.",
    ),
    "ExpectationFailed": VariantRow(
        417, _RFC + "rfc7231#section-6.5.14",
        "The expectation in the Expect request header cannot be met.",
    ),
    "FailedDependency": VariantRow(
        424, _RFC + "rfc4918#section-11.4",
        "The request failed because a request it depended on failed.",
    ),
    "Forbidden": VariantRow(
        403, _RFC + "rfc7231#section-6.5.3",
        "The client is known but lacks access rights to the resource.",
    ),
    "GatewayTimeout": VariantRow(
        504, _RFC + "rfc7231#section-6.6.5",
        "A gateway or proxy did not get a response from upstream in time.",
    ),
    "Gone": VariantRow(
        410, _RFC + "rfc7231#section-6.5.9",
        "The resource was permanently removed and has no forwarding address.",
    ),
    "HttpVersionNotSupported": VariantRow(
        505, _RFC + "rfc7231#section-6.6.6",
        "The HTTP version used in the request is not supported.",
    ),
    "ImATeapot": VariantRow(
        418, _RFC + "rfc2324#section-2.3.2",
        "The server refuses to brew coffee because it is a teapot.",
    ),
    "InsufficientSpaceOnResource": VariantRow(
        419, None,
        "Unofficial: the resource has no space left for the request.",
    ),
    "InsufficientStorage": VariantRow(
        507, _RFC + "rfc4918#section-11.5",
        "The server cannot store the representation needed to complete the request.",
    ),
    "InternalServerError": VariantRow(
        500, _RFC + "rfc7231#section-6.6.1",
        "The server hit an unexpected condition it does not know how to handle.",
    ),
    "LengthRequired": VariantRow(
        411, _RFC + "rfc7231#section-6.5.10",
        "The server requires a Content-Length header.",
    ),
    "Locked": VariantRow(
        423, _RFC + "rfc4918#section-11.3",
        "The resource being accessed is locked.",
    ),
    "MethodNotAllowed": VariantRow(
        405, _RFC + "rfc7231#section-6.5.5",
        "The request method is not supported by the target resource.",
    ),
    "NetworkAuthenticationRequired": VariantRow(
        511, _RFC + "rfc6585#section-6",
        "The client must authenticate to gain network access.",
    ),
    "NotAcceptable": VariantRow(
        406, _RFC + "rfc7231#section-6.5.6",
        "No representation matches the criteria given by the user agent.",
    ),
    "NotFound": VariantRow(
        404, _RFC + "rfc7231#section-6.5.4",
        "The server cannot find the requested resource.",
    ),
    "NotImplemented": VariantRow(
        501, _RFC + "rfc7231#section-6.6.2",
        "The server does not support the functionality the request needs.",
    ),
    "PaymentRequired": VariantRow(
        402, _RFC + "rfc7231#section-6.5.2",
        "Reserved for future use in payment systems.",
    ),
    "PreconditionFailed": VariantRow(
        412, _RFC + "rfc7232#section-4.2",
        "A precondition in the request headers evaluated to false.",
    ),
    "PreconditionRequired": VariantRow(
        428, _RFC + "rfc6585#section-3",
        "The server requires the request to be conditional.",
    ),
    "ProxyAuthenticationRequired": VariantRow(
        407, _RFC + "rfc7235#section-3.2",
        "The client must authenticate with the proxy.",
    ),
    "RequestHeaderFieldsTooLarge": VariantRow(
        431, _RFC + "rfc6585#section-5",
        "The request header fields are too large to process.",
    ),
    "RequestTimeout": VariantRow(
        408, _RFC + "rfc7231#section-6.5.7",
        "The server timed out waiting for the request.",
    ),
    "RequestTooLong": VariantRow(
        413, _RFC + "rfc7231#section-6.5.11",
        "The request body is larger than the server is willing to process.",
    ),
    "RequestURITooLong": VariantRow(
        414, _RFC + "rfc7231#section-6.5.12",
        "The request target is longer than the server is willing to interpret.",
    ),
    "RequestedRangeNotSatisfiable": VariantRow(
        416, _RFC + "rfc7233#section-4.4",
        "The requested range cannot be served for the target resource.",
    ),
    "ServiceUnavailable": VariantRow(
        503, _RFC + "rfc7231#section-6.6.4",
        "The server is temporarily unable to handle the request.",
    ),
    "TooManyRequests": VariantRow(
        429, _RFC + "rfc6585#section-4",
        "The client sent too many requests in a given amount of time.",
    ),
    "Unauthorized": VariantRow(
        401, _RFC + "rfc7235#section-3.1",
        "The client must authenticate to get the requested response.",
    ),
    "UnprocessableEntity": VariantRow(
        422, _RFC + "rfc4918#section-11.2",
        "The request is well formed but semantically invalid.",
    ),
    "UnsupportedMediaType": VariantRow(
        415, _RFC + "rfc7231#section-6.5.13",
        "The media type of the request payload is not supported.",
    ),
}

ERROR_CODES: dict[str, int] = {name: row.status_code for name, row in ERROR_TABLE.items()}

catalog = Catalog(OutcomeFamily.error, ErrorVariant, ERROR_TABLE)

__all__ = ["ERROR_CODES", "ERROR_TABLE", "catalog", *ERROR_TABLE]


def __getattr__(name: str) -> ErrorVariant:
    variant = catalog.get(name)
    if variant is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return variant


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(ERROR_TABLE))
