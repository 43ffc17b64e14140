"""
Domain exceptions raised by repositories and services.

The API layer translates these into HTTP responses (see app/main.py):
EntityNotFoundException -> 404, InvalidEntityStateException -> 400.
"""

from typing import Any, Iterable, Optional, Tuple


class DomainException(Exception):
    """Base class for all domain-level failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityNotFoundException(DomainException):
    """A single required entity does not exist (or is soft-deleted)."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(f'Entity "{entity_name}" ({entity_id}) was not found.')
        self.entity_name = entity_name
        self.entity_id = entity_id


class InvalidEntityStateException(DomainException):
    """
    An entity failed one or more domain invariants.

    Can be raised with just a message, or with the entity name/id and the
    list of validation errors that should be surfaced to the client.
    """

    def __init__(
        self,
        entity_name: str = "",
        entity_id: Any = "",
        errors: Optional[Iterable[str]] = None,
        *,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f'Entity "{entity_name}" with ID {entity_id} is in an invalid state.'
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.errors: Tuple[str, ...] = tuple(errors or ())

    @classmethod
    def from_message(cls, message: str) -> "InvalidEntityStateException":
        return cls(message=message)
