"""Font families and fonts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from eidoplot.style import defaults

_GENERIC_FAMILIES = frozenset({"serif", "sans-serif", "cursive", "fantasy", "monospace"})


class InvalidFamilyString(ValueError):
    """Raised when a font family string is not valid CSS-like syntax."""

    def __init__(self, value: str) -> None:
        super().__init__(f'invalid font family: "{value}"')
        self.value = value


def is_valid_font_family(value: str) -> bool:
    """Check a comma separated list of family names; names with spaces must be quoted."""
    for part in (p.strip() for p in value.split(",")):
        if not part:
            return False
        if part in _GENERIC_FAMILIES:
            continue
        if part[0] in "'\"" and part[-1] == part[0]:
            if len(part) <= 2:
                return False
        elif any(ch.isspace() for ch in part):
            return False
    return True


@dataclass(frozen=True)
class Family:
    """A font family string, such as "'Noto Sans', sans-serif"."""

    name: str = defaults.FONT_FAMILY

    @classmethod
    def parse(cls, value: str) -> Family:
        """Build a family after validating it; raises InvalidFamilyString."""
        if not value or not is_valid_font_family(value):
            raise InvalidFamilyString(value)
        return cls(value)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Font:
    """A font family with a size."""

    family: Family = field(default_factory=Family)
    size: float = 24.0

    def __post_init__(self) -> None:
        if isinstance(self.family, str):
            object.__setattr__(self, "family", Family(self.family))

    def with_family(self, family) -> Font:
        return replace(self, family=Family(family) if isinstance(family, str) else family)

    def with_size(self, size: float) -> Font:
        return replace(self, size=size)

    @classmethod
    def coerce(cls, value) -> Font:
        """Build a font from a font, a family, a (family, size) pair or a size."""
        if isinstance(value, Font):
            return value
        if isinstance(value, (Family, str)):
            return cls(family=value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(family=value[0], size=float(value[1]))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(size=float(value))
        raise TypeError(f"cannot make a font from {value!r}")