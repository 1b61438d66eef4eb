"""A movable filesystem path."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from gmengine.debug import EngineError

PathLike = Union[str, "os.PathLike[str]"]


class EnginePath:
    """A filesystem path that can be moved around; defaults to the working directory."""

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path = Path.cwd() if path is None else Path(path)

    def __fspath__(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def is_directory(self) -> bool:
        return self.path.is_dir()

    def is_file(self) -> bool:
        """True for anything that is not a directory, including missing paths."""
        return not self.is_directory()

    def move_parent(self) -> None:
        self.path = self.path.parent

    def file_name(self) -> str:
        """Name with extension; raises EngineError for a directory."""
        if self.is_directory():
            raise EngineError(f"file_name needs a file path: {self.path}")
        return self.path.name

    def directory_name(self) -> str:
        """Last component; raises EngineError unless the path is a directory."""
        if not self.is_directory():
            raise EngineError(f"directory_name needs a directory path: {self.path}")
        return self.path.name

    def extension(self) -> str:
        """The extension with its leading dot, or an empty string."""
        return self.path.suffix

    def append(self, name: PathLike) -> None:
        self.path = self.path / name

    def move(self, name: PathLike) -> bool:
        """Append ``name``; raises EngineError if the result does not exist."""
        self.append(name)
        if not self.exists():
            raise EngineError(f"tried to move to a path that does not exist: {self.path}")
        return True

    def move_parent_to_directory(self, name: PathLike) -> bool:
        """Walk up from this directory until ``name`` exists beside a parent.

        On success the path becomes that entry and True is returned; the root
        itself is not searched. Raises EngineError if this is not a directory.
        """
        if not self.is_directory():
            raise EngineError(
                f"move_parent_to_directory needs a directory path: {self.path}"
            )
        root = Path(self.path.anchor)
        for base in (self.path, *self.path.parents):
            if base == root:
                break
            candidate = base / name
            if candidate.exists():
                self.path = candidate
                return True
        return False