"""Nested records whose ids are drawn from a shared counter."""

from .id_generator import DEFAULT_GENERATOR, IdGenerator
from .nested_record import ID_PREFIX, AuxRecord, CompositeRecord, SubRecord
from .self_check import (
    FAILURE_MESSAGE,
    SelfCheckFailed,
    expected_next_id,
    run_self_check,
    verify_increment,
    verify_sequence,
)

__all__ = [
    "IdGenerator",
    "DEFAULT_GENERATOR",
    "ID_PREFIX",
    "SubRecord",
    "AuxRecord",
    "CompositeRecord",
    "FAILURE_MESSAGE",
    "SelfCheckFailed",
    "expected_next_id",
    "verify_increment",
    "verify_sequence",
    "run_self_check",
]
