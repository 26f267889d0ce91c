"""Per-record decoding of API results."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pydantic import ValidationError

T = TypeVar("T")


@dataclass
class Decoded(Generic[T]):
    """Outcome of decoding one record: a value or an error message."""

    index: int
    label: str
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_validation_error(exc: ValidationError) -> str:
    """Render a pydantic validation error as a single line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _label(record: Any, index: int, label_keys: tuple[str, ...]) -> str:
    if isinstance(record, dict):
        for key in label_keys:
            value = record.get(key)
            if isinstance(value, str) and value:
                return value
    return f"#{index}"


def decode_records(
    records: list[Any],
    decoder: Callable[[Any], T],
    label_keys: tuple[str, ...] = ("name",),
) -> list[Decoded[T]]:
    """Decode every record independently.

    A record that fails validation yields a ``Decoded`` with ``error`` set;
    the remaining records are still decoded.

    Args:
        records: Raw records from an API result
        decoder: Callable turning one raw record into a model
        label_keys: Record keys tried in order to name a record in messages

    Returns:
        One ``Decoded`` per input record, in input order
    """
    results: list[Decoded[T]] = []
    for index, record in enumerate(records):
        label = _label(record, index, label_keys)
        try:
            results.append(Decoded(index=index, label=label, value=decoder(record)))
        except ValidationError as e:
            results.append(Decoded(index=index, label=label, error=format_validation_error(e)))
    return results
