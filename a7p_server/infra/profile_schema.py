"""The `profedit` protobuf schema behind every .a7p file.

Mirrors `a7p_server/proto/profedit.proto`. The descriptor is assembled here
instead of shipping protoc output, so the message classes come straight from
the protobuf runtime. The rest of the package only uses `Payload` and the
helpers below; nothing else should depend on how the classes are produced.
"""
from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "profedit"

_F = descriptor_pb2.FieldDescriptorProto

_INT32 = _F.TYPE_INT32
_STRING = _F.TYPE_STRING
_ENUM = _F.TYPE_ENUM
_MESSAGE = _F.TYPE_MESSAGE


def _field(name: str, number: int, ftype: int, *, repeated: bool = False, type_name: str | None = None) -> _F:
    field = _F(
        name=name,
        number=number,
        type=ftype,
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
    )
    if type_name is not None:
        field.type_name = f".{PACKAGE}.{type_name}"
    return field


def _enum(name: str, values: list[str]) -> descriptor_pb2.EnumDescriptorProto:
    return descriptor_pb2.EnumDescriptorProto(
        name=name,
        value=[descriptor_pb2.EnumValueDescriptorProto(name=v, number=i) for i, v in enumerate(values)],
    )


_PROFILE_FIELDS = [
    _field("profile_name", 1, _STRING),
    _field("cartridge_name", 2, _STRING),
    _field("bullet_name", 3, _STRING),
    _field("short_name_top", 4, _STRING),
    _field("short_name_bot", 5, _STRING),
    _field("user_note", 6, _STRING),
    _field("zero_x", 7, _INT32),
    _field("zero_y", 8, _INT32),
    _field("sc_height", 9, _INT32),
    _field("r_twist", 10, _INT32),
    _field("c_muzzle_velocity", 11, _INT32),
    _field("c_zero_temperature", 12, _INT32),
    _field("c_t_coeff", 13, _INT32),
    _field("c_zero_distance_idx", 14, _INT32),
    _field("c_zero_air_temperature", 15, _INT32),
    _field("c_zero_air_pressure", 16, _INT32),
    _field("c_zero_air_humidity", 17, _INT32),
    _field("c_zero_w_pitch", 18, _INT32),
    _field("c_zero_p_temperature", 19, _INT32),
    _field("b_diameter", 20, _INT32),
    _field("b_weight", 21, _INT32),
    _field("b_length", 22, _INT32),
    _field("twist_dir", 23, _ENUM, type_name="TwistDir"),
    _field("bc_type", 24, _ENUM, type_name="GType"),
    _field("switches", 25, _MESSAGE, repeated=True, type_name="SwPos"),
    _field("distances", 26, _INT32, repeated=True),
    _field("coef_rows", 27, _MESSAGE, repeated=True, type_name="CoefRow"),
    _field("caliber", 28, _STRING),
    _field("device_uuid", 29, _STRING),
]


def _file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    return descriptor_pb2.FileDescriptorProto(
        name=f"{PACKAGE}/profedit.proto",
        package=PACKAGE,
        syntax="proto3",
        enum_type=[
            _enum("DType", ["VALUE", "INDEX"]),
            _enum("GType", ["G1", "G7", "CUSTOM"]),
            _enum("TwistDir", ["RIGHT", "LEFT"]),
        ],
        message_type=[
            descriptor_pb2.DescriptorProto(
                name="Payload",
                field=[_field("profile", 1, _MESSAGE, type_name="Profile")],
            ),
            descriptor_pb2.DescriptorProto(
                name="CoefRow",
                field=[_field("bc_cd", 1, _INT32), _field("mv", 2, _INT32)],
            ),
            descriptor_pb2.DescriptorProto(
                name="SwPos",
                field=[
                    _field("c_idx", 1, _INT32),
                    _field("reticle_idx", 2, _INT32),
                    _field("zoom", 3, _INT32),
                    _field("distance", 4, _INT32),
                    _field("distance_from", 5, _ENUM, type_name="DType"),
                ],
            ),
            descriptor_pb2.DescriptorProto(name="Profile", field=_PROFILE_FIELDS),
        ],
    )


# Private pool: the default pool may already hold another `profedit` package.
_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


Payload = _message_class("Payload")
Profile = _message_class("Profile")
SwPos = _message_class("SwPos")
CoefRow = _message_class("CoefRow")


def profile_field_names() -> list[str]:
    """Field names of `Profile` in declaration order."""
    return [f.name for f in Profile.DESCRIPTOR.fields]


def new_payload():
    """A payload whose profile is present with every field at its default."""
    payload = Payload()
    payload.profile.SetInParent()
    return payload
