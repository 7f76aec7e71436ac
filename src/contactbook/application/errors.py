"""Typed failures raised by the application layer. HTTP mapping lives in the API."""


class ContactBookError(Exception):
    """Base class for contact book failures."""


class ValidationError(ContactBookError):
    """Missing or malformed required input (maps to 400)."""


class NotFoundError(ContactBookError):
    """The referenced contact id does not exist (maps to 404)."""

    def __init__(self, contact_id: str) -> None:
        super().__init__("Contact not found")
        self.contact_id = contact_id
