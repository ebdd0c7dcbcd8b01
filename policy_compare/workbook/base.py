from abc import ABC, abstractmethod

from policy_compare.workbook.models import Sheet


class BaseWorkbookReader(ABC):
    """Contract for all spreadsheet workbook adapters."""

    @abstractmethod
    def read(self, content: bytes) -> list[Sheet]:
        """Decode a workbook container into its sheets.

        Args:
            content: Raw workbook file content.

        Returns:
            Sheets in the order they are stored in the workbook.

        Raises:
            WorkbookReadError: if the container cannot be decoded.
        """
