"""
Flat-file store for fetched reports.

Reports are kept byte-for-byte under their published name
(``Informe_Comunicacion_YYYYMMDD.ods``).  The date in the name sorts
lexicographically, so the last name is the most recent report.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

REPORT_GLOB = "Informe_Comunicacion_*.ods"


class ReportStore:

    def __init__(self, directory: str | Path, pattern: str = REPORT_GLOB) -> None:
        self._dir = Path(directory)
        self._pattern = pattern

    @property
    def directory(self) -> Path:
        return self._dir

    def names(self) -> List[str]:
        if not self._dir.is_dir():
            return []
        return sorted(p.name for p in self._dir.glob(self._pattern) if p.is_file())

    def latest_name(self) -> Optional[str]:
        names = self.names()
        return names[-1] if names else None

    def read(self, name: str) -> bytes:
        return (self._dir / name).read_bytes()

    def write(self, name: str, content: bytes) -> Path:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._dir / name
        path.write_bytes(content)
        logger.info("  Stored %s (%d bytes)", path, len(content))
        return path
