"""Payload kind selection by declared media type and file-name suffix."""

from enum import Enum

from policy_compare.documents.models import UploadedDocument

_WORKBOOK_SUFFIXES = (".xls", ".xlsx")
_WORKBOOK_TYPE_MARKERS = ("sheet", "excel")


class PayloadKind(str, Enum):
    WORKBOOK = "workbook"
    DELIMITED = "delimited"
    BINARY = "binary"


def classify(document: UploadedDocument) -> PayloadKind:
    """Decide how a document is sent to the model. Content is never inspected."""
    name = document.name.lower()
    media_type = document.media_type.lower()

    # Browsers on Windows often declare .csv files as application/vnd.ms-excel.
    if name.endswith(".csv"):
        return PayloadKind.DELIMITED
    if name.endswith(_WORKBOOK_SUFFIXES) or any(
        marker in media_type for marker in _WORKBOOK_TYPE_MARKERS
    ):
        return PayloadKind.WORKBOOK
    if media_type == "text/csv":
        return PayloadKind.DELIMITED
    return PayloadKind.BINARY
