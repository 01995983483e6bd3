from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Mapping, NamedTuple

from core.metrics import record_outcome
from outcomes.failures import HttpError
from outcomes.model import Outcome, construct


class OutcomeFamily(str, Enum):
    error = "error"
    response = "response"


class VariantRow(NamedTuple):
    status_code: int
    reference: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Variant(ABC):
    """A named outcome kind with a fixed status code.

    ``status`` and ``message`` are defaults fixed by the variant; arguments
    passed at call time take precedence over them. ``parents`` holds the
    variants this one was derived from, nearest first.
    """

    name: str
    status_code: int
    status: str | None = None
    message: str | None = None
    parents: tuple[Variant, ...] = field(default=(), repr=False)
    reference: str | None = field(default=None, compare=False, repr=False)
    description: str | None = field(default=None, compare=False, repr=False)

    family = OutcomeFamily.response

    def __post_init__(self) -> None:
        doc = "\n\n".join(part for part in (self.description, self.reference) if part)
        if doc:
            object.__setattr__(self, "__doc__", doc)

    @property
    def ancestry(self) -> tuple[Variant, ...]:
        return (self, *self.parents)

    @property
    def lineage(self) -> tuple[str, ...]:
        return tuple(variant.name for variant in self.ancestry)

    def build(self, message: str | None = None, status: str | None = None) -> Outcome:
        outcome = construct(
            self.status_code,
            message=message or self.message,
            status=status or self.status,
        )
        record_outcome(self.family.value, self.name, outcome.status_code)
        return outcome

    def derive(
        self,
        name: str,
        *,
        status: str | None = None,
        message: str | None = None,
        description: str | None = None,
    ) -> Variant:
        if not name:
            raise ValueError("variant name must be non-empty")
        return replace(
            self,
            name=name,
            status=status or self.status,
            message=message or self.message,
            parents=self.ancestry,
            description=description or self.description,
        )

    @abstractmethod
    def __call__(self, message: str | None = None, status: str | None = None) -> Outcome | HttpError:
        ...

    @abstractmethod
    def matches(self, value: object) -> bool:
        ...


class ResponseVariant(Variant):
    family = OutcomeFamily.response

    def __call__(self, message: str | None = None, status: str | None = None) -> Outcome:
        return self.build(message, status)

    def matches(self, value: object) -> bool:
        """True when ``value`` is an Outcome this variant could have produced."""
        if not isinstance(value, Outcome):
            return False
        if value.status_code != self.status_code:
            return False
        return self.status is None or value.status == self.status


class ErrorVariant(Variant):
    family = OutcomeFamily.error

    def __call__(self, message: str | None = None, status: str | None = None) -> HttpError:
        return HttpError(self.build(message, status), variants=self.ancestry)

    def matches(self, value: object) -> bool:
        """True when ``value`` was raised through this variant or one derived from it.

        Variants are compared by value, so two derivations sharing a name but
        fixing different labels or messages do not match each other.
        """
        if not isinstance(value, HttpError):
            return False
        return any(variant == self for variant in value.variants)


class Catalog:
    """Named variants generated from a name -> :class:`VariantRow` table."""

    def __init__(
        self,
        family: OutcomeFamily,
        variant_cls: type[Variant],
        table: Mapping[str, VariantRow | int],
    ) -> None:
        self.family = family
        self._variants: dict[str, Variant] = {}
        for name, row in table.items():
            if not isinstance(row, VariantRow):
                row = VariantRow(row)
            self._variants[name] = variant_cls(
                name=name,
                status_code=row.status_code,
                reference=row.reference,
                description=row.description,
            )

    def __getattr__(self, name: str) -> Variant:
        variants = self.__dict__.get("_variants", {})
        try:
            return variants[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> Variant:
        return self._variants[name]

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)

    def get(self, name: str) -> Variant | None:
        return self._variants.get(name)

    def names(self) -> list[str]:
        return sorted(self._variants)

    def for_code(self, status_code: int) -> list[Variant]:
        return [variant for variant in self._variants.values() if variant.status_code == status_code]
