"""Resources that lie in provinces and can be collected by armies."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum


class ResourceKind(Enum):
    """Kinds of resource; the number is the percentage bonus it grants."""

    NONE = "none"
    STRENGTH5 = "strength+5%"
    STRENGTH10 = "strength+10%"
    STRENGTH15 = "strength+15%"
    DAMAGE5 = "damage+5%"
    DAMAGE10 = "damage+10%"
    DAMAGE15 = "damage+15%"

    @property
    def is_valuable(self) -> bool:
        """True for every kind that actually grants a bonus."""
        return self is not ResourceKind.NONE


_DRAW_TABLE = (
    ResourceKind.STRENGTH5,
    ResourceKind.STRENGTH10,
    ResourceKind.STRENGTH15,
    ResourceKind.DAMAGE5,
    ResourceKind.DAMAGE10,
    ResourceKind.DAMAGE15,
)


def random_kind(rng: random.Random | None = None) -> ResourceKind:
    """Draw a resource kind: each valuable kind has a 1 in 51 chance."""
    rng = rng or random.Random()
    draw = rng.randint(0, 50)
    if draw < len(_DRAW_TABLE):
        return _DRAW_TABLE[draw]
    return ResourceKind.NONE


@dataclass
class Resource:
    """A resource in a province; once collected it stays inactive."""

    kind: ResourceKind = ResourceKind.NONE
    active: bool = field(default=True)

    @classmethod
    def random(cls, rng: random.Random | None = None) -> "Resource":
        """Create an active resource of a randomly drawn kind."""
        return cls(kind=random_kind(rng), active=True)