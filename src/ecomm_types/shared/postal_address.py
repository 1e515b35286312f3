"""PostalAddress value object.

Based on ``google.type.PostalAddress``. Given a postal address, a postal
service can deliver items to a premise, P.O. Box or similar. It is not
intended to model geographical locations (roads, towns, mountains).
"""

from typing import Optional

from protean.exceptions import ValidationError
from protean.fields import List, Text

from ecomm_types.domain import ecomm_types
from ecomm_types.pb import types_pb2
from ecomm_types.utils.wire import present

# May be combined with a postal address's UUID to form the datastore key name for a postal address entity
KEY_PREFIX_POSTAL_ADDRESS = "postaladdress:"


@ecomm_types.value_object
class PostalAddress:
    """A structured postal address.

    ``region_code`` is the only field an address needs, but it is not enforced
    here: conversion from the wire must always succeed. Call ``ensure_valid``
    at the points where an address has to be deliverable.
    """

    # CLDR region code of the country/region of the address, e.g. "CH".
    # Never inferred.
    region_code: Text(referenced_as="regionCode", sanitize=False)

    # BCP-47 language code of the contents of this address, if known.
    # Examples: "zh-Hant", "ja", "ja-Latn", "en".
    language_code: Text(referenced_as="languageCode", sanitize=False)

    postal_code: Text(referenced_as="postalCode", sanitize=False)

    # Country-specific sorting code, e.g. "CEDEX 7". Not used in most regions.
    sorting_code: Text(referenced_as="sortingCode", sanitize=False)

    # Highest administrative subdivision: a state, province, oblast or prefecture.
    administrative_area: Text(referenced_as="administrativeArea", sanitize=False)

    # City or town portion of the address.
    locality: Text(referenced_as="locality", sanitize=False)

    # Neighborhood, borough or district within the locality.
    sublocality: Text(referenced_as="sublocality", sanitize=False)

    # Unstructured lower levels of the address, in envelope order.
    address_lines: List(content_type=Text, referenced_as="addressLines")

    # May carry "care of" information.
    recipients: List(content_type=Text, referenced_as="recipients")

    organization: Text(referenced_as="organization", sanitize=False)

    # Delivery box, where several parties share the same address.
    mailbox_id: Text(referenced_as="mailboxId", sanitize=False)

    @classmethod
    def from_pb(cls, p: Optional[types_pb2.PostalAddress]) -> Optional["PostalAddress"]:
        """Build a PostalAddress from its protocol buffer equivalent, ``None`` for ``None``."""
        if p is None:
            return None
        return cls(
            region_code=p.region_code,
            language_code=p.language_code,
            postal_code=p.postal_code,
            sorting_code=p.sorting_code,
            administrative_area=p.administrative_area,
            locality=p.locality,
            sublocality=p.sublocality,
            address_lines=list(p.address_lines),
            recipients=list(p.recipients),
            organization=p.organization,
            mailbox_id=p.mailbox_id,
        )

    def as_pb(self) -> types_pb2.PostalAddress:
        """Return the protocol buffer representation of this PostalAddress."""
        return types_pb2.PostalAddress(
            **present(
                region_code=self.region_code,
                language_code=self.language_code,
                postal_code=self.postal_code,
                sorting_code=self.sorting_code,
                administrative_area=self.administrative_area,
                locality=self.locality,
                sublocality=self.sublocality,
                address_lines=list(self.address_lines) if self.address_lines else None,
                recipients=list(self.recipients) if self.recipients else None,
                organization=self.organization,
                mailbox_id=self.mailbox_id,
            )
        )

    def ensure_valid(self) -> None:
        """Raise ``ValidationError`` if the address has no region code."""
        if not self.region_code:
            raise ValidationError({"region_code": ["Region code is required"]})
