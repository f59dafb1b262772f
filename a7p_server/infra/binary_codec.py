from google.protobuf.message import DecodeError

from a7p_server.domain.errors import MalformedBinary
from a7p_server.infra.profile_schema import Payload


def decode(data: bytes):
    payload = Payload()
    try:
        payload.ParseFromString(data)
    except DecodeError as e:
        raise MalformedBinary(f"cannot decode profile: {e}") from e
    return payload


def encode(payload) -> bytes:
    return payload.SerializeToString(deterministic=True)
