# src/incpath/search_path.py
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .resolver import Filesystem, StrPath, resolve

CURRENT_DIR = Path(".")


@dataclass(slots=True)
class SearchPath:
    """Ordered include directories, highest precedence first.

    The current directory is only searched when it is an explicit entry
    (see with_current_dir).
    """

    dirs: list[Path] = field(default_factory=list)
    fs: Filesystem | None = None

    def __post_init__(self) -> None:
        self.dirs = [Path(d) for d in self.dirs]

    def __iter__(self) -> Iterator[Path]:
        return iter(self.dirs)

    def __len__(self) -> int:
        return len(self.dirs)

    def append(self, directory: StrPath) -> None:
        self.dirs.append(Path(directory))

    def extend(self, directories: Iterable[StrPath]) -> None:
        self.dirs.extend(Path(d) for d in directories)

    def prepend(self, directory: StrPath) -> None:
        self.dirs.insert(0, Path(directory))

    def with_current_dir(self) -> SearchPath:
        return SearchPath([*self.dirs, CURRENT_DIR], fs=self.fs)

    def resolve(self, file_ref: StrPath, verbose: int = 0) -> Path | None:
        return resolve(self.dirs, file_ref, fs=self.fs, verbose=verbose)

    def resolve_all(self, file_ref: StrPath, verbose: int = 0) -> list[Path]:
        """Every distinct hit for file_ref in search order.

        The first element is what resolve() returns; the rest are shadowed.
        """
        hits: list[Path] = []
        for directory in self.dirs:
            hit = resolve([directory], file_ref, fs=self.fs, verbose=verbose)
            if hit is not None and hit not in hits:
                hits.append(hit)
        return hits

    def require(self, file_ref: StrPath, verbose: int = 0) -> Path:
        """Resolve file_ref or raise.

        Raises:
            FileNotFoundError: If no directory holds file_ref
        """
        hit = self.resolve(file_ref, verbose=verbose)
        if hit is None:
            searched = ", ".join(str(d) for d in self.dirs) or "<empty search path>"
            raise FileNotFoundError(f"Include '{file_ref}' not found in: {searched}")
        return hit
