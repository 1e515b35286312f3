"""Message classes for ``pb/types.proto``.

The file descriptor is assembled from ``descriptor_pb2`` and registered with
the default descriptor pool, so the messages interoperate with any other
protobuf code in the process exactly as protoc output would.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PROTO_FILE = "ecomm/types/types.proto"
PROTO_PACKAGE = "ecomm.types"

_STRING = descriptor_pb2.FieldDescriptorProto.TYPE_STRING
_OPTIONAL = descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL
_REPEATED = descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED


def _json_name(field_name: str) -> str:
    head, *rest = field_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _message(name, fields):
    """Build a DescriptorProto from ``(field_name, number, repeated)`` triples."""
    message = descriptor_pb2.DescriptorProto(name=name)
    for field_name, number, repeated in fields:
        message.field.add(
            name=field_name,
            number=number,
            type=_STRING,
            label=_REPEATED if repeated else _OPTIONAL,
            json_name=_json_name(field_name),
        )
    return message


_file = descriptor_pb2.FileDescriptorProto(
    name=PROTO_FILE,
    package=PROTO_PACKAGE,
    syntax="proto3",
)
_file.message_type.append(
    _message(
        "Person",
        [
            ("id", 1, False),
            ("family_name", 2, False),
            ("given_name", 3, False),
            ("middle_name", 4, False),
            ("display_name", 5, False),
        ],
    )
)
_file.message_type.append(
    _message(
        "PostalAddress",
        [
            ("region_code", 2, False),
            ("language_code", 3, False),
            ("postal_code", 4, False),
            ("sorting_code", 5, False),
            ("administrative_area", 6, False),
            ("locality", 7, False),
            ("sublocality", 8, False),
            ("address_lines", 9, True),
            ("recipients", 10, True),
            ("organization", 11, False),
            ("mailbox_id", 12, False),
        ],
    )
)

DESCRIPTOR = descriptor_pool.Default().AddSerializedFile(_file.SerializeToString())

Person = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["Person"])
PostalAddress = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["PostalAddress"])
