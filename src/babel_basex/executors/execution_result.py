from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class ExecutionResult:
    status: str  # success|failed|error
    exit_code: int
    output: str = ""
    stderr: str = ""
    duration_sec: float = 0.0
    command: List[str] = field(default_factory=list)
    error: Optional[str] = None
    runtime_meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == "success" and self.exit_code == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "exit_code": self.exit_code,
            "output": self.output,
            "stderr": self.stderr,
            "duration_sec": self.duration_sec,
            "command": list(self.command),
            "error": self.error,
            "runtime_meta": self.runtime_meta,
        }
