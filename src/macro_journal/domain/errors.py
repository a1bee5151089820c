"""Domain errors surfaced to API callers."""


class MacroJournalError(Exception):
    """Base class for expected, user-facing failures."""


class NotFoundError(MacroJournalError):
    """Raised when a referenced row does not exist."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ReferenceInUseError(MacroJournalError):
    """Raised when deleting a row that other rows still reference."""

    def __init__(self, message: str, references: list[str] | None = None):
        self.references = references or []
        super().__init__(message)


class ValidationError(MacroJournalError):
    """Raised when input breaks a data invariant."""


class InvalidEntryError(ValidationError):
    """Raised for meal entries with a bad quantity or reference."""


class InvalidServingsError(ValidationError):
    """Raised when a recipe has no positive serving count."""
