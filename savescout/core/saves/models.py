from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class SaveLocationSource(str, Enum):
    CACHED = "cached"
    AUTO = "auto"
    MISSING = "missing"


@dataclass(slots=True)
class SaveLocation:
    path: Path
    source: SaveLocationSource

    def to_payload(self) -> dict[str, str]:
        return {"path": str(self.path), "source": self.source.value}


@dataclass(slots=True)
class SaveFolder:
    name: str
    display_name: str
    path: Path
    modified_at: datetime | None

    def to_payload(self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "path": str(self.path),
            "modified_at": self.modified_at.isoformat() if self.modified_at is not None else None,
        }
