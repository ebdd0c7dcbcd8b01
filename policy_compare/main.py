import argparse
import json
import sys
from pathlib import Path

from policy_compare.comparison.factory import RequesterFactory
from policy_compare.config.settings import Settings
from policy_compare.documents.file_loader import FileLoader
from policy_compare.export.excel_export import build_workbook
from policy_compare.export.pdf_report import build_pdf_report
from policy_compare.logging.logger import Log
from policy_compare.session import ComparisonSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policy-compare",
        description="Compare insurance policy documents side by side.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF, XLS(X), CSV or image files")
    parser.add_argument("--pdf", type=Path, help="write the PDF report to this path")
    parser.add_argument("--xlsx", type=Path, help="write the Excel workbook to this path")
    parser.add_argument("--json", action="store_true", help="print the raw result as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: load files -> compare once -> print and export."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    loader = FileLoader()
    try:
        documents = [loader.load(path) for path in args.files]
    except FileNotFoundError as exc:
        Log.error(str(exc))
        return 1

    session = ComparisonSession(settings)
    session.add_documents(documents)
    if len(documents) > len(session.files):
        Log.warning("Extra files ignored", max_files=settings.max_files)

    try:
        requester = RequesterFactory.create(settings)
    except ValueError as exc:
        Log.error(f"Comparison provider misconfigured: {exc}")
        print(exc, file=sys.stderr)
        return 1

    outcome = session.compare(requester)
    if outcome.result is None:
        print(outcome.error, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(outcome.result.to_wire(), ensure_ascii=False, indent=2))
    else:
        print(outcome.result.summary)
    if args.pdf:
        args.pdf.write_bytes(build_pdf_report(outcome.result))
        Log.info("PDF report written", path=args.pdf)
    if args.xlsx:
        args.xlsx.write_bytes(build_workbook(outcome.result))
        Log.info("Workbook written", path=args.xlsx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
