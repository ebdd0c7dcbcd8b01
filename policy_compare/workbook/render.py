"""Renders decoded sheets as comma-delimited text blocks for the model."""

import csv
import io

from policy_compare.workbook.models import Sheet


def render_workbook(sheets: list[Sheet]) -> str:
    """Concatenate one headed block per non-empty sheet, in stored order.

    Each block reads ``--- Sheet: <name> ---`` followed by the sheet as CSV
    and a blank line. Sheets without any non-empty cell are left out.
    """
    blocks: list[str] = []
    for sheet in sheets:
        csv_text = render_sheet(sheet)
        if csv_text.strip():
            blocks.append(f"--- Sheet: {sheet.name} ---\n{csv_text}\n\n")
    return "".join(blocks)


def render_sheet(sheet: Sheet) -> str:
    rows = [[_cell_text(value) for value in row] for row in sheet.rows]
    rows = [row for row in rows if any(cell.strip() for cell in row)]
    if not rows:
        return ""

    width = max(
        (max((i + 1 for i, cell in enumerate(row) if cell.strip()), default=0) for row in rows),
        default=0,
    )
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in rows:
        writer.writerow(row[:width] + [""] * (width - len(row)))
    return buf.getvalue().rstrip("\n")


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
