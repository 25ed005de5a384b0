"""Theme palettes, design tokens and CSS custom-property generation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from meteorite.core.variant import Variant


@dataclass
class Palette:
    """Color palette of a theme.

    Each entry of ``extra`` becomes a ``--met-{key}`` CSS variable and a
    ``.met-{key}`` variant class.
    """

    bg: str
    fg: str
    primary: str
    secondary: str
    success: str
    warning: str
    danger: str
    muted: str
    border: str
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def dark(cls) -> Palette:
        return cls(
            bg="#0a0a0a",
            fg="#fafafa",
            primary="#3b82f6",
            secondary="#6366f1",
            success="#22c55e",
            warning="#eab308",
            danger="#ef4444",
            muted="#71717a",
            border="#27272a",
        )

    @classmethod
    def light(cls) -> Palette:
        return cls(
            bg="#ffffff",
            fg="#09090b",
            primary="#2563eb",
            secondary="#4f46e5",
            success="#16a34a",
            warning="#ca8a04",
            danger="#dc2626",
            muted="#a1a1aa",
            border="#e4e4e7",
        )


@dataclass
class Tokens:
    """Design tokens for spacing, radius and typography.

    Each entry of ``extra`` becomes a ``--met-{key}`` CSS variable.
    """

    radius_sm: str = "4px"
    radius_md: str = "6px"
    radius_lg: str = "12px"
    font_sm: str = "0.875rem"
    font_md: str = "1rem"
    font_lg: str = "1.25rem"
    space_xs: str = "4px"
    space_sm: str = "8px"
    space_md: str = "16px"
    space_lg: str = "24px"
    space_xl: str = "32px"
    extra: dict[str, str] = field(default_factory=dict)


_BUILTIN_VARIANT_FIELDS = {
    "default": "fg",
    "primary": "primary",
    "secondary": "secondary",
    "success": "success",
    "warning": "warning",
    "danger": "danger",
}


@dataclass
class Theme:
    """A named palette plus design tokens. The default theme is dark."""

    name: str = "dark"
    palette: Palette = field(default_factory=Palette.dark)
    tokens: Tokens = field(default_factory=Tokens)

    @classmethod
    def dark(cls) -> Theme:
        return cls(name="dark", palette=Palette.dark(), tokens=Tokens())

    @classmethod
    def light(cls) -> Theme:
        return cls(name="light", palette=Palette.light(), tokens=Tokens())

    @classmethod
    def custom(cls, name: str, palette: Palette) -> Theme:
        """A theme with the given palette and default tokens."""
        return cls(name=name, palette=palette, tokens=Tokens())

    @classmethod
    def builder(cls, name: str) -> ThemeBuilder:
        """Start building a theme from the dark palette and default tokens."""
        return ThemeBuilder(name)

    def to_css_vars(self) -> str:
        """CSS custom properties for this theme, plus classes for extra colors."""
        p = self.palette
        t = self.tokens
        builtin = [
            ("bg", p.bg),
            ("fg", p.fg),
            ("primary", p.primary),
            ("secondary", p.secondary),
            ("success", p.success),
            ("warning", p.warning),
            ("danger", p.danger),
            ("muted", p.muted),
            ("border", p.border),
            ("radius-sm", t.radius_sm),
            ("radius-md", t.radius_md),
            ("radius-lg", t.radius_lg),
            ("font-sm", t.font_sm),
            ("font-md", t.font_md),
            ("font-lg", t.font_lg),
            ("space-xs", t.space_xs),
            ("space-sm", t.space_sm),
            ("space-md", t.space_md),
            ("space-lg", t.space_lg),
            ("space-xl", t.space_xl),
        ]
        variables = [
            *builtin,
            *sorted(p.extra.items()),
            *sorted(t.extra.items()),
        ]
        lines = [":root {"]
        lines += [f"  --met-{key}: {value};" for key, value in variables]
        css = "\n".join(lines) + "\n}\n"
        css += "".join(
            f".met-{key} {{ --_c: var(--met-{key}); "
            f"--_bg: color-mix(in srgb, var(--met-{key}) 15%, transparent); }}\n"
            for key in sorted(p.extra)
        )
        return css

    def variant_color(self, variant: Variant) -> str:
        """The palette color a variant resolves to."""
        if variant.is_custom:
            return self.palette.extra.get(variant.name, self.palette.fg)
        if variant.name == "ghost":
            return "transparent"
        attribute = _BUILTIN_VARIANT_FIELDS.get(variant.name, "fg")
        return getattr(self.palette, attribute)


class ThemeBuilder:
    """Fluent builder for a :class:`Theme`."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._palette = Palette.dark()
        self._tokens = Tokens()

    def palette(self, palette: Palette) -> ThemeBuilder:
        """Replace the whole palette."""
        self._palette = replace(palette, extra=dict(palette.extra))
        return self

    def tokens(self, tokens: Tokens) -> ThemeBuilder:
        """Replace the whole token set."""
        self._tokens = replace(tokens, extra=dict(tokens.extra))
        return self

    def extra_color(self, name: str, value: str) -> ThemeBuilder:
        """Add a custom color, emitted as ``--met-{name}`` and ``.met-{name}``."""
        self._palette.extra[name] = value
        return self

    def extra_token(self, name: str, value: str) -> ThemeBuilder:
        """Add a custom token, emitted as ``--met-{name}``."""
        self._tokens.extra[name] = value
        return self

    def build(self) -> Theme:
        return Theme(
            name=self._name,
            palette=replace(self._palette, extra=dict(self._palette.extra)),
            tokens=replace(self._tokens, extra=dict(self._tokens.extra)),
        )