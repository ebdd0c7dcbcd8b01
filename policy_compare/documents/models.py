import secrets
from dataclasses import dataclass, field
from typing import Protocol

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class UploadLike(Protocol):
    """Subset of Streamlit's UploadedFile used to build documents."""

    name: str
    type: str | None

    def getvalue(self) -> bytes: ...


def _new_token() -> str:
    return secrets.token_hex(4)


@dataclass(frozen=True)
class UploadedDocument:
    """A file selected by the user for comparison."""

    name: str
    media_type: str
    content: bytes
    size_bytes: int
    token: str = field(default_factory=_new_token)

    @classmethod
    def create(cls, name: str, media_type: str | None, content: bytes) -> "UploadedDocument":
        return cls(
            name=name,
            media_type=media_type or "",
            content=content,
            size_bytes=len(content),
        )

    @classmethod
    def from_upload(cls, upload: UploadLike) -> "UploadedDocument":
        return cls.create(upload.name, upload.type, upload.getvalue())


@dataclass(frozen=True)
class BinaryPayload:
    """Base64 file content passed to the model verbatim (PDF, image)."""

    source_name: str
    media_type: str
    data: str


@dataclass(frozen=True)
class TextPayload:
    """Plain-text rendering of a tabular source (CSV or workbook)."""

    source_name: str
    source_kind: str  # "Excel" or "CSV"
    text: str


NormalizedPayload = BinaryPayload | TextPayload
