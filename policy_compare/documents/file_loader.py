import mimetypes
from pathlib import Path

from policy_compare.documents.models import DEFAULT_MEDIA_TYPE, UploadedDocument


class FileLoader:
    """Reads documents from disk for headless comparisons."""

    def load(self, path: Path) -> UploadedDocument:
        """Read file bytes and guess the media type from the suffix.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        media_type, _ = mimetypes.guess_type(path.name)
        return UploadedDocument.create(
            name=path.name,
            media_type=media_type or DEFAULT_MEDIA_TYPE,
            content=path.read_bytes(),
        )
