"""Shared value types for the e-commerce services."""

from ecomm_types.domain import ecomm_types
from ecomm_types.errors import NilInputError, ParseError
from ecomm_types.shared.money import Money
from ecomm_types.shared.person import KEY_PREFIX_PERSON, Person
from ecomm_types.shared.postal_address import KEY_PREFIX_POSTAL_ADDRESS, PostalAddress
from ecomm_types.shared.timestamp import Timestamp
from ecomm_types.utils.document import from_document, to_document

__all__ = [
    "ecomm_types",
    "KEY_PREFIX_PERSON",
    "KEY_PREFIX_POSTAL_ADDRESS",
    "Money",
    "NilInputError",
    "ParseError",
    "Person",
    "PostalAddress",
    "Timestamp",
    "from_document",
    "to_document",
]
