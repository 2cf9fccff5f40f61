import re
from pathlib import Path

from originality.external.models import WorkingFile

_UNSAFE_CHARS_RE = re.compile(r"[^\w.\-]+")


def safe_filename(name: str) -> str:
    """Strip directories and replace characters unsafe in a filename."""
    base = Path(name.replace("\\", "/")).name
    cleaned = _UNSAFE_CHARS_RE.sub("_", base).strip("._")
    return cleaned or "submission"


class SubmissionWriter:
    """Materializes working files into the tool's submissions directory."""

    def write(self, submissions_dir: Path, files: list[WorkingFile]) -> list[Path]:
        submissions_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for working_file in files:
            path = submissions_dir / safe_filename(working_file.name)
            path.write_bytes(working_file.content)
            written.append(path)
        return written
