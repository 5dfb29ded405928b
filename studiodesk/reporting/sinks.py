"""Excel and CSV exports for report rows."""
import csv
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from openpyxl import Workbook

logger = logging.getLogger(__name__)

Table = Tuple[List[str], List[List[Any]]]


def _as_table(rows: Iterable[Dict[str, Any]]) -> Optional[Table]:
    """Columns come from the first row; later rows fill missing cells with ''."""

    rows = list(rows)
    if not rows:
        return None
    headers = list(rows[0])
    return headers, [[row.get(header, "") for header in headers] for row in rows]


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path, sheet_title: str = "report") -> Optional[Path]:
    """Write one worksheet with a header row; nothing is written for an empty report."""

    table = _as_table(rows)
    if table is None:
        logger.info("Skipping empty %s export", sheet_title)
        return None

    headers, body = table
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title
    sheet.append(headers)
    for values in body:
        sheet.append(values)
    sheet.freeze_panes = "A2"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    logger.info("Exported %d %s rows to %s", len(body), sheet_title, output_path)
    return output_path


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> Optional[Path]:
    table = _as_table(rows)
    if table is None:
        return None

    headers, body = table
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(headers)
        writer.writerows(body)
    logger.info("Exported %d rows to %s", len(body), output_path)
    return output_path
