"""Dataclasses for file generation."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class FileOperation(str, Enum):
    CREATING = "creating"
    OVERWRITING = "overwriting"


@dataclass(frozen=True)
class GenerationContext:
    """What a generator is producing and where it goes."""
    schema: str
    relation: str
    filename: Path
    namespace: str
    flexible_container: Optional[Any] = None

    def __post_init__(self):
        # Accept plain strings for the target path
        object.__setattr__(self, "filename", Path(self.filename))

    @property
    def log_extra(self) -> Dict[str, str]:
        """Logging context for this generation."""
        return {"schema": self.schema, "relation": self.relation, "target": str(self.filename)}


@dataclass
class OutputRecord:
    """One file operation reported back to the caller."""
    status: str  # "ok" or "failed"
    operation: Optional[FileOperation]
    file: Path
    message: Optional[str] = field(default=None)

    def as_dict(self) -> Dict[str, str]:
        data = {
            "status": self.status,
            "operation": self.operation.value if self.operation else None,
            "file": str(self.file),
        }
        if self.message is not None:
            data["message"] = self.message
        return data
