"""CSV and JSON persistence for ratings matrices and confidence reports."""

import csv
from pathlib import Path

from filelock import FileLock

from mosci.common.models import MOSConfidenceReport


def _is_number(cell: str) -> bool:
    try:
        float(cell)
    except ValueError:
        return False
    return True


def load_ratings_csv(
    path: str | Path,
    has_header: bool | None = None,
) -> tuple[list[list[float]], list[str] | None]:
    """Read a ratings matrix from a CSV file.

    One row per test condition, one column per subject. A non-numeric first
    column is returned as test condition labels.

    Args:
        path: Path to the CSV file
        has_header: Whether the first line is a header. When None, a first
            line with any non-numeric cell is taken as a header, so a
            headerless file with condition labels needs ``has_header=False``.

    Returns:
        Tuple of (ratings as a list of rows, condition labels or None)

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file is not UTF-8 text
        csv.Error: If the file is not valid CSV

    Example:
        >>> load_ratings_csv("ratings.csv")  # tc,s1,s2 / A,1,2 / B,4,5
        ([[1.0, 2.0], [4.0, 5.0]], ['A', 'B'])
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with path.open("r", newline="", encoding="utf-8") as f:
        rows = [[cell.strip() for cell in row] for row in csv.reader(f) if any(row)]

    if has_header is None:
        has_header = bool(rows) and not all(_is_number(cell) for cell in rows[0])
    if has_header:
        rows = rows[1:]

    labels: list[str] | None = None
    if rows and not all(_is_number(row[0]) for row in rows):
        labels = [row[0] for row in rows]
        rows = [row[1:] for row in rows]

    # Non-numeric cells are left to the estimator's rating validation.
    ratings = [[float(cell) if _is_number(cell) else cell for cell in row] for row in rows]
    return ratings, labels


def write_report_json(report: MOSConfidenceReport, path: str | Path) -> None:
    """Write a report as indented JSON, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    lock_path = path.with_suffix(path.suffix + ".lock")
    with FileLock(lock_path):
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")


def read_report_json(path: str | Path) -> MOSConfidenceReport:
    """Read a report written by write_report_json.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    return MOSConfidenceReport.model_validate_json(path.read_text(encoding="utf-8"))


def write_report_csv(
    report: MOSConfidenceReport,
    path: str | Path,
    labels: list[str] | None = None,
) -> None:
    """Export a report to a flat CSV file.

    One row per test condition with columns ``condition``, ``mos`` and, for
    each estimator short label, ``<label>_lower``, ``<label>_upper`` and
    ``<label>_width``.

    Args:
        report: Report to export
        path: Path to write the CSV file
        labels: Optional test condition labels (default: row indices)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = ["condition", "mos"]
    for label in report.short_labels:
        fieldnames += [f"{label}_lower", f"{label}_upper", f"{label}_width"]

    rows = []
    for i, mos in enumerate(report.mos):
        row: dict[str, str | float] = {
            "condition": labels[i] if labels else str(i),
            "mos": round(mos, 6),
        }
        for j, label in enumerate(report.short_labels):
            row[f"{label}_lower"] = round(report.ci_lower[i][j], 6)
            row[f"{label}_upper"] = round(report.ci_upper[i][j], 6)
            row[f"{label}_width"] = round(report.ci_width[i][j], 6)
        rows.append(row)

    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)
