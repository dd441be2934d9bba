"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class ImportFormatError(DomainError):
    """Import document or one of its records cannot be read."""


def duplicate_record(kind: str, record_id: str) -> str:
    """Return message for a record id that already exists."""
    return f"{kind.capitalize()} '{record_id}' already exists"


def invalid_record(collection: str, index: int, reason: str) -> str:
    """Return message for an unreadable record in an import document."""
    return f"Invalid record {index} in '{collection}': {reason}"


def negative_amount(transaction_id: str) -> str:
    """Return message for a transaction carrying a negative amount."""
    return (
        f"Transaction '{transaction_id}' has a negative amount; "
        "use type 'expense' instead of a negative sign"
    )
