from __future__ import annotations

from typing import TYPE_CHECKING

from outcomes.model import Outcome, construct

if TYPE_CHECKING:
    from outcomes.variants import Variant


class HttpError(Exception):
    """Raisable wrapper around an error-family :class:`Outcome`.

    ``variants`` holds the variants the error was built through, most
    specific first, so handlers can match a derived variant or any of its
    ancestors. ``lineage`` is the same chain by name.
    """

    def __init__(self, outcome: Outcome, *, variants: tuple[Variant, ...] = ()) -> None:
        super().__init__(outcome.message)
        self._outcome = outcome
        self._variants = tuple(variants)

    @classmethod
    def from_options(
        cls,
        status_code: int | None = None,
        message: str | None = None,
        status: str | None = None,
    ) -> HttpError:
        return cls(construct(status_code, message=message, status=status))

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def variants(self) -> tuple[Variant, ...]:
        return self._variants

    @property
    def lineage(self) -> tuple[str, ...]:
        return tuple(variant.name for variant in self._variants)

    @property
    def status_code(self) -> int:
        return self._outcome.status_code

    @property
    def status(self) -> str:
        return self._outcome.status

    @property
    def message(self) -> str:
        return self._outcome.message

    @property
    def variant(self) -> str | None:
        return self._variants[0].name if self._variants else None

    def __reduce__(self):
        return (type(self), (self._outcome,), {"_variants": self._variants})

    def __str__(self) -> str:
        return self._outcome.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"status={self.status!r}, message={self.message!r}, variant={self.variant!r})"
        )


def is_http_error(exc: BaseException | None) -> bool:
    return isinstance(exc, HttpError)


def outcome_of(exc: BaseException | None) -> Outcome | None:
    if isinstance(exc, HttpError):
        return exc.outcome
    return None
