"""Visual variants for components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Variant:
    """A visual variant: one of the built-in ones or a custom palette color.

    Built-in variants are available as class attributes (``Variant.PRIMARY``
    and so on). Custom variants name a key of the palette's extra colors
    and are made with :meth:`Variant.custom`.
    """

    name: str
    is_custom: bool = False

    DEFAULT: ClassVar[Variant]
    PRIMARY: ClassVar[Variant]
    SECONDARY: ClassVar[Variant]
    SUCCESS: ClassVar[Variant]
    WARNING: ClassVar[Variant]
    DANGER: ClassVar[Variant]
    GHOST: ClassVar[Variant]

    @classmethod
    def custom(cls, name: str) -> Variant:
        """A user-defined variant referring to an extra palette color."""
        return cls(name, is_custom=True)

    def css_class(self) -> str:
        """CSS class name emitted on the element."""
        return f"met-{self.name}"


Variant.DEFAULT = Variant("default")
Variant.PRIMARY = Variant("primary")
Variant.SECONDARY = Variant("secondary")
Variant.SUCCESS = Variant("success")
Variant.WARNING = Variant("warning")
Variant.DANGER = Variant("danger")
Variant.GHOST = Variant("ghost")