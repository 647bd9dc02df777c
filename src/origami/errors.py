"""Exception types raised by origami."""


class OrigamiError(Exception):
    """Base class for all origami errors."""


class NoInstanceError(OrigamiError, TypeError):
    """Raised when a type has no semigroup or monoid instance."""

    def __init__(self, cls: type, kind: str = "semigroup"):
        self.cls = cls
        self.kind = kind
        name = getattr(cls, "__qualname__", repr(cls))
        super().__init__(f"No {kind} instance for {name}")


class EmptyFoldError(OrigamiError, ValueError):
    """Raised when folding empty input without knowing the monoid."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot fold an empty sequence without a monoid; pass monoid=..."
        )
