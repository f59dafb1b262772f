from enum import Enum


class ErrorStage(str, Enum):
    filename = "filename"
    read = "read"
    checksum = "checksum"
    binary = "binary"
    text = "text"
