from policy_compare.config.settings import Settings
from policy_compare.workbook.base import BaseWorkbookReader
from policy_compare.workbook.openpyxl_adapter import OpenpyxlWorkbookAdapter
from policy_compare.workbook.pandas_adapter import PandasWorkbookAdapter


class WorkbookReaderFactory:
    """Creates the correct workbook reader based on settings."""

    ADAPTERS: dict[str, type[BaseWorkbookReader]] = {
        "pandas": PandasWorkbookAdapter,
        "openpyxl": OpenpyxlWorkbookAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseWorkbookReader:
        engine = settings.workbook_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown workbook engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
