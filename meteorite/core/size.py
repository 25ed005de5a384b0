"""Component sizing."""

from __future__ import annotations

import enum


class Size(enum.Enum):
    """Size of a component; ``MD`` is the usual default."""

    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"

    def css_class(self) -> str:
        """CSS class name emitted for this size."""
        return f"met-{self.value}"