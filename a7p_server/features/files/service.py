import logging
from pathlib import Path
from typing import Any

from a7p_server.infra import binary_codec, checksum, filename_policy, text_codec
from a7p_server.infra.storage import ProfileDirectory

logger = logging.getLogger(__name__)


class ProfileFilesService:
    """Load, store, delete and list .a7p files in one directory.

    Load: filename -> read -> checksum unwrap -> binary decode -> JSON.
    Store runs the same steps in reverse. The first failing step raises its
    `ProfileFileError` and nothing after it runs.
    """

    def __init__(self, *, files_dir: Path) -> None:
        self._files = ProfileDirectory(files_dir, extension=filename_policy.EXTENSION)

    def list_files(self) -> list[str]:
        return self._files.list_names()

    def load(self, *, filename: str) -> str:
        return text_codec.to_text(self._read_payload(filename))

    def load_tree(self, *, filename: str) -> dict[str, Any]:
        return text_codec.to_tree(self._read_payload(filename))

    def store(self, *, filename: str, text: str) -> None:
        name = filename_policy.validate(filename)
        self._write_payload(name, text_codec.from_text(text))

    def store_tree(self, *, filename: str, tree: dict[str, Any]) -> None:
        name = filename_policy.validate(filename)
        self._write_payload(name, text_codec.from_tree(tree))

    def delete(self, *, filename: str) -> None:
        name = filename_policy.validate(filename)
        self._files.remove(name)
        logger.info("deleted %s", name)

    def _read_payload(self, filename: str):
        name = filename_policy.validate(filename)
        blob = self._files.read_bytes(name)
        payload = binary_codec.decode(checksum.unwrap(blob))
        logger.debug("loaded %s (%d bytes)", name, len(blob))
        return payload

    def _write_payload(self, name: str, payload) -> None:
        blob = checksum.wrap(binary_codec.encode(payload))
        self._files.write_bytes(name, blob)
        logger.info("stored %s (%d bytes)", name, len(blob))
