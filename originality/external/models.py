from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class WorkingFile:
    """One submission handed to the external tool."""

    name: str
    content: bytes


@dataclass(frozen=True)
class ComparisonRow:
    """One row of the tool's exported comparison table."""

    submission_a: str
    submission_b: str
    similarity: float


@dataclass
class ExternalToolResult:
    """Outcome of one external tool invocation."""

    success: bool
    summary: dict[str, object] = field(default_factory=dict)
    report_dir: Path | None = None
