"""Self-check that successive composite records receive consecutive ids."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .id_generator import DEFAULT_GENERATOR, IdGenerator
from .nested_record import ID_PREFIX, CompositeRecord

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Nested classes should have different IDs"


class SelfCheckFailed(RuntimeError):
    """Raised when successive records do not differ by exactly one id."""

    def __init__(self, message: str = FAILURE_MESSAGE) -> None:
        super().__init__(message)


def expected_next_id(record: CompositeRecord) -> int:
    return record.sub.id + 1


def verify_increment(first: CompositeRecord, second: CompositeRecord) -> None:
    """Check that ``second`` was allocated the id directly after ``first``.

    The integer ids are compared first; the rendered text of ``second`` must
    also carry the expected id.
    """
    expected = expected_next_id(first)
    actual = second.sub.id
    if actual != expected:
        raise SelfCheckFailed(
            f"{FAILURE_MESSAGE}: expected id {expected} after {first.sub.id}, got {actual}"
        )

    rendered = second.aux.render()
    if rendered != f"{ID_PREFIX}{expected}":
        raise SelfCheckFailed(
            f"{FAILURE_MESSAGE}: rendered {rendered!r} does not show id {expected}"
        )


def verify_sequence(records: Sequence[CompositeRecord]) -> None:
    for previous, current in zip(records, records[1:]):
        verify_increment(previous, current)


def run_self_check(
    generator: Optional[IdGenerator] = None,
) -> Tuple[CompositeRecord, CompositeRecord]:
    """Build two records in order and verify their ids increment by one."""
    source = generator if generator is not None else DEFAULT_GENERATOR

    first = CompositeRecord(source)
    second = CompositeRecord(source)

    try:
        verify_increment(first, second)
    except SelfCheckFailed:
        logger.error("Self-check failed for ids %d and %d", first.sub.id, second.sub.id)
        raise

    logger.info("Self-check passed: %s follows id %d", second.aux.render(), first.sub.id)
    return first, second


__all__ = [
    "FAILURE_MESSAGE",
    "SelfCheckFailed",
    "expected_next_id",
    "verify_increment",
    "verify_sequence",
    "run_self_check",
]
