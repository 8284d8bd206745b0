"""Composite record owning an id-bearing sub record and a display helper."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .id_generator import DEFAULT_GENERATOR, IdGenerator

logger = logging.getLogger(__name__)

ID_PREFIX = "ID: "


@dataclass(frozen=True)
class SubRecord:
    id: int

    def __str__(self) -> str:
        return str(self.id)


class AuxRecord:
    """Renders the owning record's id for display."""

    __slots__ = ("_owner",)

    def __init__(self, owner: "CompositeRecord") -> None:
        self._owner = owner

    @property
    def owner(self) -> "CompositeRecord":
        return self._owner

    def render(self) -> str:
        return f"{ID_PREFIX}{self._owner.sub}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


@dataclass
class CompositeRecord:
    generator: IdGenerator = field(default=DEFAULT_GENERATOR, repr=False, compare=False)
    sub: SubRecord = field(init=False)
    aux: AuxRecord = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # The sub record must consume its id before the aux record exists.
        self.sub = SubRecord(self.generator.allocate_next())
        self.aux = AuxRecord(self)
        logger.debug("Constructed %r", self)


__all__ = ["ID_PREFIX", "SubRecord", "AuxRecord", "CompositeRecord"]
