"""
===============================================================================
CRC CARD — infrastructure/storage/temp_files.py
===============================================================================

Class:
  TempFileStore

Responsibilities:
  - Write request-scoped files (exports attached to mail) to a directory.
  - Guarantee removal when the scope exits, on success and on failure.

Collaborators:
  - tempfile.mkstemp (unique, race-free names)
  - crosscutting.logger

Notes:
  - directory="" means the system temp dir.
  - Removal errors are logged, never raised: the caller's outcome wins.
===============================================================================
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ...crosscutting.logger import logger


class TempFileStore:
    def __init__(self, directory: Optional[str] = None) -> None:
        self._directory = directory or None
        if self._directory:
            Path(self._directory).mkdir(parents=True, exist_ok=True)

    @contextmanager
    def scoped(self, content: bytes, *, name: str, suffix: str) -> Iterator[Path]:
        fd, raw_path = tempfile.mkstemp(
            prefix=f"{name}_", suffix=suffix, dir=self._directory
        )
        path = Path(raw_path)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            logger.debug(
                "scoped file written", extra={"file": path.name, "bytes": len(content)}
            )
            yield path
        finally:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning(
                    "scoped file could not be removed",
                    extra={"file": str(path), "error": str(exc)},
                )
