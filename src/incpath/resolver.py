# src/incpath/resolver.py
"""Include path resolution.

Searches an ordered list of directories for a file reference and returns the
canonical path of the first hit, the way a preprocessor resolves `include`.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import typer

StrPath = str | os.PathLike[str]


class Filesystem(Protocol):
    """Host primitives used by the resolver.

    Swappable so callers can route lookups through another view of the
    filesystem (or simulate races in tests).
    """

    def join(self, directory: StrPath, file_ref: StrPath) -> StrPath:
        """Join with host semantics: an absolute file_ref replaces directory.

        The candidate is probed as joined, without normalization.
        """
        ...

    def exists(self, path: StrPath) -> bool:
        """Existence check that follows symlinks. Must not raise."""
        ...

    def canonicalize(self, path: StrPath) -> Path:
        """Absolute path with `.`, `..` and links resolved.

        Raises:
            OSError: If the path cannot be canonicalized
        """
        ...


class HostFilesystem:
    def join(self, directory: StrPath, file_ref: StrPath) -> StrPath:
        # Path() would drop a trailing separator, turning "hdr.h/" into a hit
        return os.path.join(os.fspath(directory), os.fspath(file_ref))

    def exists(self, path: StrPath) -> bool:
        # os.path.exists maps PermissionError and friends to False, Path.exists does not
        return os.path.exists(path)

    def canonicalize(self, path: StrPath) -> Path:
        try:
            return Path(path).resolve(strict=True)
        except RuntimeError as e:
            # symlink loops raise RuntimeError before 3.13
            raise OSError(f"Cannot canonicalize {path}: {e}") from e


HOST = HostFilesystem()


def resolve(
    search_list: Iterable[StrPath],
    file_ref: StrPath,
    *,
    fs: Filesystem | None = None,
    verbose: int = 0,
) -> Path | None:
    """Resolve file_ref against search_list, first match wins.

    Candidates that are missing, inaccessible, or that vanish before they can
    be canonicalized are skipped; a miss is not an error.

    Args:
        search_list: Ordered directories; earlier entries shadow later ones
        file_ref: Relative or absolute path of the file to find
        fs: Filesystem primitives (defaults to the host)
        verbose: 1 reports the outcome, 2 also reports every candidate

    Returns:
        Canonical absolute path of the first existing candidate, or None

    Examples:
        >>> resolve(["/usr/include", "/opt/include"], "stdio.h")
        PosixPath('/usr/include/stdio.h')
    """
    if fs is None:
        fs = HOST

    for directory in search_list:
        candidate = fs.join(directory, file_ref)
        if verbose >= 2:
            typer.echo(f"[resolve] probe {candidate}", err=True)

        if not fs.exists(candidate):
            if verbose >= 2:
                typer.echo(f"[resolve-skip] {candidate}: missing", err=True)
            continue

        try:
            resolved = fs.canonicalize(candidate)
        except OSError as e:
            if verbose >= 2:
                typer.echo(f"[resolve-skip] {candidate}: {e}", err=True)
            continue

        if verbose >= 1:
            typer.echo(f"[resolve] {file_ref} → {resolved}", err=True)
        return resolved

    if verbose >= 1:
        typer.echo(f"[resolve] {file_ref} not found", err=True)
    return None
