import io

import openpyxl

from policy_compare.documents.exceptions import WorkbookReadError
from policy_compare.workbook.base import BaseWorkbookReader
from policy_compare.workbook.models import Sheet


class OpenpyxlWorkbookAdapter(BaseWorkbookReader):
    """Reads modern .xlsx workbooks with openpyxl in read-only mode."""

    def read(self, content: bytes) -> list[Sheet]:
        try:
            workbook = openpyxl.load_workbook(
                io.BytesIO(content), read_only=True, data_only=True
            )
        except Exception as exc:
            raise WorkbookReadError(f"openpyxl workbook read failed: {exc}") from exc
        try:
            return [
                Sheet(
                    name=worksheet.title,
                    rows=[list(row) for row in worksheet.iter_rows(values_only=True)],
                )
                for worksheet in workbook.worksheets
            ]
        finally:
            workbook.close()
