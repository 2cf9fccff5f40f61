import csv
import io
import math
from dataclasses import asdict

from originality.external.models import ComparisonRow


def _to_float(value: str) -> float:
    try:
        number = float(value.strip().rstrip("%"))
    except ValueError:
        return 0.0
    # NaN and infinity cannot be stored as JSON.
    return number if math.isfinite(number) else 0.0


def parse_comparison_rows(csv_text: str) -> list[ComparisonRow]:
    """Read ``{submission_a, submission_b, similarity}`` rows from the export.

    The similarity column is the first header containing "similar"
    (case-insensitive), or the last column when none does.
    """
    rows = [
        row
        for row in csv.reader(io.StringIO(csv_text.strip()))
        if any(cell.strip() for cell in row)
    ]
    if len(rows) <= 1:
        return []
    header = [cell.strip() for cell in rows[0]]
    sim_idx = next(
        (i for i, name in enumerate(header) if "similar" in name.lower()),
        len(header) - 1,
    )
    parsed: list[ComparisonRow] = []
    for row in rows[1:]:
        cells = [cell.strip() for cell in row]
        parsed.append(
            ComparisonRow(
                submission_a=cells[0],
                submission_b=cells[1] if len(cells) > 1 else "",
                similarity=_to_float(cells[sim_idx]) if sim_idx < len(cells) else 0.0,
            )
        )
    return parsed


def summarize_comparisons(csv_text: str, top: int = 20) -> dict[str, object]:
    """Summarize the export as max/avg similarity plus the strongest pairs."""
    rows = parse_comparison_rows(csv_text)
    if not rows:
        return {"notice": "no-rows"}
    similarities = [row.similarity for row in rows]
    strongest = sorted(rows, key=lambda row: row.similarity, reverse=True)[:top]
    return {
        "max_similarity": max(similarities),
        "avg_similarity": sum(similarities) / len(similarities),
        "top_20_pairs": [asdict(row) for row in strongest],
    }
