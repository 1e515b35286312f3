"""Person value object describing a human individual."""

from typing import Optional

from protean.fields import Text

from ecomm_types.domain import ecomm_types
from ecomm_types.pb import types_pb2
from ecomm_types.utils.wire import present

# May be combined with a person's UUID to form the datastore key name for a person entity
KEY_PREFIX_PERSON = "person:"


@ecomm_types.value_object
class Person:
    """A person's name, as it would be addressed on an order or a shopping cart.

    See https://developers.google.com/people/api/rest/v1/people#Person.Name for
    the field naming. ``display_name_last_first`` exists only in storage: the
    wire message has no such field, so conversions leave it alone.
    """

    id: Text(referenced_as="id", sanitize=False)
    family_name: Text(referenced_as="familyName", sanitize=False)
    given_name: Text(referenced_as="givenName", sanitize=False)
    middle_name: Text(referenced_as="middleName", sanitize=False)
    display_name: Text(referenced_as="displayName", sanitize=False)
    display_name_last_first: Text(referenced_as="displayNameLastFirst", sanitize=False)

    @classmethod
    def from_pb(cls, pb_person: Optional[types_pb2.Person]) -> Optional["Person"]:
        """Build a Person from its protocol buffer equivalent, ``None`` for ``None``."""
        if pb_person is None:
            return None
        return cls(
            id=pb_person.id,
            family_name=pb_person.family_name,
            given_name=pb_person.given_name,
            middle_name=pb_person.middle_name,
            display_name=pb_person.display_name,
        )

    def as_pb(self) -> types_pb2.Person:
        """Return the protocol buffer representation of this Person."""
        return types_pb2.Person(
            **present(
                id=self.id,
                family_name=self.family_name,
                given_name=self.given_name,
                middle_name=self.middle_name,
                display_name=self.display_name,
            )
        )

    def key_name(self) -> str:
        """Datastore key name for this person."""
        if not self.id:
            raise ValueError("cannot form a datastore key for a person without an id")
        return KEY_PREFIX_PERSON + self.id
