"""File emission: the only part of the scaffolder that touches the disk.

Composers produce ``GeneratedArtifact`` values; the ``FileEmitter`` normalises
their content and writes them under the project root.  Writes run in a worker
thread via ``asyncio.to_thread`` so the orchestrator stays a plain coroutine.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .errors import ArtifactWriteError


@dataclass(frozen=True)
class GeneratedArtifact:
    """A single file to emit.

    ``path`` is POSIX-style and relative to the project root.
    """

    path: str
    content: str


def normalize_content(raw: str) -> str:
    """Trim surrounding whitespace and terminate with exactly one newline."""
    return raw.strip() + "\n"


class FileEmitter:
    """Writes artifacts and directories beneath a project root.

    Args:
        root: Project root directory.  Must already exist.
        on_write: Optional callback invoked with the absolute path of every
            file after it has been written.
    """

    def __init__(
        self,
        root: Path,
        on_write: Callable[[Path], None] | None = None,
    ) -> None:
        self.root = root
        self.on_write = on_write

    async def make_directories(self, rel_paths: Iterable[str]) -> None:
        """Create each directory in *rel_paths* (and any missing parents)."""

        async def _mkdir(rel: str) -> None:
            await asyncio.to_thread(_make_dir, self.root / rel)

        await asyncio.gather(*[_mkdir(rel) for rel in rel_paths])

    async def write(self, artifact: GeneratedArtifact) -> Path:
        """Normalise and write *artifact*, overwriting any existing file.

        Returns:
            Absolute path of the written file.

        Raises:
            ArtifactWriteError: If the filesystem rejects the write.
        """
        out = self.root / artifact.path
        content = normalize_content(artifact.content)
        await asyncio.to_thread(_write_file, out, content)
        if self.on_write is not None:
            self.on_write(out)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ArtifactWriteError(path, exc) from exc


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)
    except OSError as exc:
        raise ArtifactWriteError(path, exc) from exc
