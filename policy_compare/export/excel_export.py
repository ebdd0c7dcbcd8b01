import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from policy_compare.comparison.models import ComparisonResult
from policy_compare.export.rows import EXCEL_LABELS, PLAIN_LISTS, comparison_rows

SHEET_TITLE = "Karşılaştırma"
LABEL_COLUMN_WIDTH = 25
DATA_COLUMN_WIDTH = 40


def build_workbook(result: ComparisonResult) -> bytes:
    """Single-sheet workbook: summary line, blank line, header row, field rows."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    sheet.append(["Karşılaştırma Özeti:", result.summary])
    sheet.append([])
    sheet.append(["Özellik", *(p.company_name for p in result.policies)])
    for row in comparison_rows(result, EXCEL_LABELS, PLAIN_LISTS):
        sheet.append(row)

    for cell in sheet[3]:
        cell.font = Font(bold=True)
    for row in sheet.iter_rows(min_row=4):
        for cell in row:
            cell.alignment = Alignment(wrap_text=True, vertical="top")

    sheet.column_dimensions["A"].width = LABEL_COLUMN_WIDTH
    for index in range(len(result.policies)):
        sheet.column_dimensions[get_column_letter(index + 2)].width = DATA_COLUMN_WIDTH

    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()
