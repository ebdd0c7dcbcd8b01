class DocumentReadError(Exception):
    """Raised when an uploaded file cannot be turned into a payload."""

    def __init__(self, file_name: str, message: str | None = None) -> None:
        self.file_name = file_name
        super().__init__(message or f"Dosya okunamadı: {file_name}")


class WorkbookReadError(Exception):
    """Raised when a workbook container cannot be decoded."""
