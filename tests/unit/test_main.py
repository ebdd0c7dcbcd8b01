"""Tests for the headless command line entry point."""

import io
import json
from pathlib import Path

import pytest
from openpyxl import load_workbook

from policy_compare.main import main


@pytest.fixture(autouse=True)
def _example_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPARISON_PROVIDER", "example")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")


@pytest.fixture()
def offer_files(tmp_path: Path, sample_pdf_bytes: bytes) -> list[Path]:
    pdf = tmp_path / "anadolu.pdf"
    pdf.write_bytes(sample_pdf_bytes)
    csv = tmp_path / "allianz.csv"
    csv.write_text("Şirket;Prim\nAllianz;₺14.250,50\n", encoding="utf-8")
    return [pdf, csv]


class TestMain:
    def test_prints_json_result(
        self, offer_files: list[Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([*map(str, offer_files), "--json"])
        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert [p["companyName"] for p in data["policies"]] == [
            "Örnek Sigorta 1",
            "Örnek Sigorta 2",
        ]

    def test_writes_exports(self, offer_files: list[Path], tmp_path: Path) -> None:
        pdf_out = tmp_path / "rapor.pdf"
        xlsx_out = tmp_path / "rapor.xlsx"
        exit_code = main([*map(str, offer_files), "--pdf", str(pdf_out), "--xlsx", str(xlsx_out)])
        assert exit_code == 0
        assert pdf_out.read_bytes().startswith(b"%PDF")
        sheet = load_workbook(io.BytesIO(xlsx_out.read_bytes())).active
        assert sheet["A3"].value == "Özellik"

    def test_single_file_is_rejected(
        self, offer_files: list[Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(offer_files[0])])
        assert exit_code == 1
        assert "en az 2 dosya" in capsys.readouterr().err

    def test_missing_file_fails(self, offer_files: list[Path], tmp_path: Path) -> None:
        assert main([str(offer_files[0]), str(tmp_path / "yok.pdf")]) == 1

    def test_unknown_provider_is_reported_without_traceback(
        self,
        offer_files: list[Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COMPARISON_PROVIDER", "nonexistent")
        assert main([str(path) for path in offer_files]) == 1
        assert "Unknown comparison provider" in capsys.readouterr().err

    def test_openai_compatible_without_base_url_fails(
        self,
        offer_files: list[Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COMPARISON_PROVIDER", "openai_compatible")
        assert main([str(path) for path in offer_files]) == 1
        assert "comparison_openai_compatible_base_url" in capsys.readouterr().err
