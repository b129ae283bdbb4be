from __future__ import annotations

from pathlib import Path


class LocalFileWriter:
    """Local side-output for retrieve actions routed to a file."""

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)

    def write(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)
