import io

import pytest
from openpyxl import Workbook
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from policy_compare.comparison.models import ComparisonResult
from policy_compare.documents.models import UploadedDocument
from tests.helpers import make_policy

XLSX_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _workbook_bytes(sheets: dict[str, list[list[object]]]) -> bytes:
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture()
def multi_sheet_xlsx_bytes() -> bytes:
    """Three sheets; the middle one is empty."""
    return _workbook_bytes({
        "Kasko": [["Şirket", "Prim"], ["Anadolu", 12500]],
        "Bos": [],
        "Trafik": [["Şirket", "Prim"], ["Allianz", "₺3.200,00"]],
    })


@pytest.fixture()
def premium_xlsx_bytes() -> bytes:
    """Single sheet carrying a Turkish-formatted premium string."""
    return _workbook_bytes({
        "Teklif": [["Şirket", "Prim Tutarı"], ["Anadolu Sigorta", "₺12.500,00"]],
    })


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Kasko Teklifi")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_document(sample_pdf_bytes: bytes) -> UploadedDocument:
    return UploadedDocument.create("teklif.pdf", "application/pdf", sample_pdf_bytes)


@pytest.fixture()
def xlsx_document(premium_xlsx_bytes: bytes) -> UploadedDocument:
    return UploadedDocument.create("teklif.xlsx", XLSX_TYPE, premium_xlsx_bytes)


@pytest.fixture()
def csv_document() -> UploadedDocument:
    content = "Şirket;Prim\nAxa;₺9.750,00\n".encode()
    return UploadedDocument.create("teklif.csv", "text/csv", content)


@pytest.fixture()
def image_document() -> UploadedDocument:
    return UploadedDocument.create("teklif.png", "image/png", b"\x89PNG\r\n\x1a\nfake")


@pytest.fixture()
def sample_result() -> ComparisonResult:
    return ComparisonResult(
        policies=[
            make_policy(),
            make_policy(
                company_name="Allianz",
                premium_amount=14250.5,
                limits=["İMM: 500.000 TL"],
                pros=[],
                cons=["Yüksek prim", "Şehir dışı çekici yok"],
            ),
        ],
        summary="Anadolu Sigorta daha uygun fiyatlı; Allianz daha düşük İMM limiti sunuyor.",
    )
