"""A directory path that lists its files and subdirectories."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from gmengine.file import EngineFile
from gmengine.paths import EnginePath, PathLike
from gmengine.strings import to_upper


def _iter_files(path: Path, wanted: frozenset[str], recursive: bool) -> Iterator[EngineFile]:
    for entry in sorted(path.iterdir()):
        if entry.is_dir():
            if recursive:
                yield from _iter_files(entry, wanted, True)
            continue
        if to_upper(entry.suffix) in wanted:
            yield EngineFile(entry)


class EngineDirectory(EnginePath):
    """A directory; defaults to the working directory."""

    def get_all_file(self, recursive: bool, exts: Iterable[str]) -> list[EngineFile]:
        """Files whose extension matches one of ``exts``, ignoring ASCII case.

        Entries are visited in name order; with ``recursive`` the files of a
        subdirectory appear where that subdirectory is met.
        """
        wanted = frozenset(to_upper(ext) for ext in exts)
        return list(_iter_files(self.path, wanted, recursive))

    def get_all_directory(self) -> list[EngineDirectory]:
        """The immediate subdirectories, in name order."""
        return [EngineDirectory(entry) for entry in sorted(self.path.iterdir()) if entry.is_dir()]

    def get_file(self, name: PathLike) -> EngineFile:
        """A file inside this directory; it need not exist."""
        return EngineFile(self.path / name)