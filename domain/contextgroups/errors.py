"""Error taxonomy for context group loading, closure and selection."""


class ContextGroupError(Exception):
    """Base class for context group processing failures."""


class StructuralError(ContextGroupError, ValueError):
    """The input does not have the structure of a context group definition."""


class IncludeCycleError(StructuralError):
    """A context group includes itself, directly or through other groups."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = list(chain)
        super().__init__(f"Include cycle detected: {' -> '.join(self.chain)}")


class SelectionError(ContextGroupError):
    """Wanted context groups are missing from the closed registry (strict mode only)."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Wanted CIDs not found: {', '.join(self.missing)}")
