import io

import pandas as pd

from policy_compare.documents.exceptions import WorkbookReadError
from policy_compare.workbook.base import BaseWorkbookReader
from policy_compare.workbook.models import Sheet


class PandasWorkbookAdapter(BaseWorkbookReader):
    """Reads .xlsx (openpyxl) and legacy .xls (xlrd) workbooks through pandas."""

    def read(self, content: bytes) -> list[Sheet]:
        try:
            frames = pd.read_excel(
                io.BytesIO(content), sheet_name=None, header=None, dtype=object
            )
        except Exception as exc:
            raise WorkbookReadError(f"pandas workbook read failed: {exc}") from exc
        return [
            Sheet(name=str(name), rows=self._frame_rows(frame))
            for name, frame in frames.items()
        ]

    @staticmethod
    def _frame_rows(frame: pd.DataFrame) -> list[list[object]]:
        cleaned = frame.astype(object).where(frame.notna(), None)
        return [list(row) for row in cleaned.itertuples(index=False, name=None)]
