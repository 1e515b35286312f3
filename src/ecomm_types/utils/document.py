"""Document store and JSON representation of value objects.

Every field declares the name it is stored under through protean's
``referenced_as`` option. Documents omit empty values, so a zero, an empty
string and an empty list all read back as unset.
"""

from typing import Any, Optional

from protean.utils.reflection import declared_fields


def document_name(field_name: str, field_obj) -> str:
    """Name the field takes in the document store and in JSON."""
    return field_obj.referenced_as or field_name


def to_document(value_object) -> dict[str, Any]:
    """Render a value object as a JSON-ready dict, omitting empty values."""
    document = {}
    for field_name, field_obj in declared_fields(type(value_object)).items():
        value = getattr(value_object, field_name, None)
        if not value:
            continue
        document[document_name(field_name, field_obj)] = list(value) if isinstance(value, (list, tuple)) else value
    return document


def from_document(cls, document: Optional[dict[str, Any]]):
    """Rebuild a value object of type ``cls`` from its stored document.

    ``None`` comes back as ``None``. Keys the value object does not declare
    are ignored.
    """
    if document is None:
        return None

    kwargs = {}
    for field_name, field_obj in declared_fields(cls).items():
        key = document_name(field_name, field_obj)
        if key in document:
            value = document[key]
            kwargs[field_name] = list(value) if isinstance(value, (list, tuple)) else value
    return cls(**kwargs)
