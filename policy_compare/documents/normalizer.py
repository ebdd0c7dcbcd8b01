"""Turns uploaded documents into model-ready payloads."""

import asyncio
import base64

from policy_compare.documents.classifier import PayloadKind, classify
from policy_compare.documents.exceptions import DocumentReadError, WorkbookReadError
from policy_compare.documents.models import (
    DEFAULT_MEDIA_TYPE,
    BinaryPayload,
    NormalizedPayload,
    TextPayload,
    UploadedDocument,
)
from policy_compare.logging.logger import Log
from policy_compare.workbook.base import BaseWorkbookReader
from policy_compare.workbook.render import render_workbook

_FALLBACK_TEXT_ENCODING = "cp1254"


class DocumentNormalizer:
    """Produces exactly one NormalizedPayload per UploadedDocument."""

    def __init__(self, workbook_reader: BaseWorkbookReader) -> None:
        self._workbook_reader = workbook_reader

    async def normalize(self, document: UploadedDocument) -> NormalizedPayload:
        """Convert a document into a binary or textual payload.

        Raises:
            DocumentReadError: if the file cannot be decoded.
        """
        kind = classify(document)
        Log.debug(
            "Normalizing document",
            file=document.name,
            media_type=document.media_type or "?",
            kind=kind.value,
        )
        if kind is PayloadKind.DELIMITED:
            return TextPayload(
                source_name=document.name,
                source_kind="CSV",
                text=self._decode_text(document),
            )
        if kind is PayloadKind.WORKBOOK:
            text = await asyncio.to_thread(self._render_workbook, document)
            return TextPayload(source_name=document.name, source_kind="Excel", text=text)
        data = await asyncio.to_thread(_encode_base64, document.content)
        return BinaryPayload(
            source_name=document.name,
            media_type=document.media_type or DEFAULT_MEDIA_TYPE,
            data=data,
        )

    def _render_workbook(self, document: UploadedDocument) -> str:
        try:
            sheets = self._workbook_reader.read(document.content)
        except WorkbookReadError as exc:
            Log.error(f"Workbook decoding failed: {exc}", file=document.name)
            raise DocumentReadError(
                document.name, f"Excel dosyası okunamadı: {document.name}"
            ) from exc
        return render_workbook(sheets)

    @staticmethod
    def _decode_text(document: UploadedDocument) -> str:
        try:
            return document.content.decode("utf-8")
        except UnicodeDecodeError:
            pass
        try:
            return document.content.decode(_FALLBACK_TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise DocumentReadError(document.name) from exc


def _encode_base64(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")
