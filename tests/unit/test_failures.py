import pickle

import pytest

from outcomes.errors import BadRequest
from outcomes.failures import HttpError, is_http_error, outcome_of
from outcomes.model import InvalidInputError, Outcome


def test_http_error_exposes_outcome_fields() -> None:
    exc = HttpError.from_options(409, message="email already taken")
    assert exc.status_code == 409
    assert exc.status == "Conflict"
    assert exc.message == "email already taken"
    assert str(exc) == "email already taken"
    assert exc.outcome == Outcome(status_code=409, status="Conflict", message="email already taken")
    assert exc.variant is None


def test_http_error_from_options_requires_status_code() -> None:
    with pytest.raises(InvalidInputError):
        HttpError.from_options()


def test_capability_checks_distinguish_unrelated_failures() -> None:
    structured = HttpError.from_options(503)
    unexpected = RuntimeError("boom")
    assert is_http_error(structured)
    assert not is_http_error(unexpected)
    assert not is_http_error(None)
    assert outcome_of(structured) is structured.outcome
    assert outcome_of(unexpected) is None


def test_http_error_propagates_through_raise() -> None:
    def handler() -> None:
        raise HttpError.from_options(418)

    with pytest.raises(HttpError) as excinfo:
        handler()
    assert excinfo.value.status_code == 418


def test_http_error_survives_pickling() -> None:
    ValidationError = BadRequest.derive("ValidationError", status="Validation Error")
    exc = ValidationError("bad email")
    restored = pickle.loads(pickle.dumps(exc))
    assert restored.outcome == exc.outcome
    assert restored.lineage == ("ValidationError", "BadRequest")
    assert restored.variant == "ValidationError"
    assert ValidationError.matches(restored)


def test_http_error_fields_are_read_only() -> None:
    exc = BadRequest()
    with pytest.raises(AttributeError):
        exc.outcome = Outcome(500, "Internal Server Error", "x")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        exc.lineage = ("InternalServerError",)  # type: ignore[misc]
    with pytest.raises(AttributeError):
        exc.variants = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        exc.status_code = 500  # type: ignore[misc]
    assert exc.status_code == 400
    assert exc.lineage == ("BadRequest",)
