"""User-visible comparison state and the error boundary around a comparison."""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass

from policy_compare.comparison.models import ComparisonResult
from policy_compare.comparison.requester import ComparisonRequester
from policy_compare.config.settings import Settings
from policy_compare.documents.models import UploadedDocument
from policy_compare.logging.logger import Log

GENERIC_ERROR_MESSAGE = "Analiz sırasında bir hata oluştu."


@dataclass(frozen=True)
class ComparisonOutcome:
    """Tagged result of one comparison: exactly one of result/error is set."""

    result: ComparisonResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class ComparisonSession:
    """Selected files, loading flag, last error and last result of one user."""

    def __init__(self, settings: Settings) -> None:
        self._max_files = settings.max_files
        self._min_files = settings.min_files
        self.files: list[UploadedDocument] = []
        self.loading = False
        self.error: str | None = None
        self.result: ComparisonResult | None = None

    @property
    def max_files(self) -> int:
        return self._max_files

    @property
    def is_full(self) -> bool:
        return len(self.files) >= self._max_files

    def add_documents(self, documents: Iterable[UploadedDocument]) -> None:
        """Append documents, keeping at most max_files in selection order."""
        self.files = [*self.files, *documents][: self._max_files]

    def remove(self, token: str) -> None:
        self.files = [f for f in self.files if f.token != token]

    def reset(self) -> None:
        self.files = []
        self.result = None
        self.error = None

    def compare(self, requester: ComparisonRequester) -> ComparisonOutcome:
        """Run one comparison; failures become a message, never an exception."""
        if len(self.files) < self._min_files:
            return self._fail(
                f"Lütfen karşılaştırma yapmak için en az {self._min_files} dosya yükleyin."
            )
        if self.loading:
            return self._fail("Devam eden bir karşılaştırma var.")

        self.loading = True
        self.error = None
        self.result = None
        Log.info("Starting comparison", documents=len(self.files))
        try:
            result = asyncio.run(requester.compare(list(self.files)))
        except Exception as exc:
            Log.error(f"Comparison failed: {exc}", error_type=type(exc).__name__)
            return self._fail(str(exc) or GENERIC_ERROR_MESSAGE)
        finally:
            self.loading = False

        self.result = result
        return ComparisonOutcome(result=result)

    def _fail(self, message: str) -> ComparisonOutcome:
        self.error = message
        return ComparisonOutcome(error=message)
