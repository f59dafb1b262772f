from pathlib import Path

from a7p_server.domain.errors import ProfileNotFound


class ProfileDirectory:
    """Whole-file access to the served directory.

    Names must already have passed `filename_policy.validate`. Writes go
    straight to the target file with no temp-file/rename step, so a crash
    mid-write leaves a file the checksum rejects on the next load.
    """

    def __init__(self, root: Path, extension: str) -> None:
        self._root = root
        self._extension = extension

    def list_names(self) -> list[str]:
        return sorted(p.name for p in self._root.iterdir() if p.name.endswith(self._extension))

    def read_bytes(self, name: str) -> bytes:
        try:
            return (self._root / name).read_bytes()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise ProfileNotFound(name) from e

    def write_bytes(self, name: str, data: bytes) -> None:
        (self._root / name).write_bytes(data)

    def remove(self, name: str) -> None:
        try:
            (self._root / name).unlink()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise ProfileNotFound(name) from e
