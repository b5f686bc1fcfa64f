"""Tests for the PDF export wrapper."""

from pathlib import Path

from pharmacv.pdf_export import ExportResult, PdfPrinter, export_cv_to_pdf


class FakePrinter(PdfPrinter):
    def __init__(self):
        self.html = None

    def print_to_file(self, html: str, output_path: Path) -> Path:
        self.html = html
        output_path.write_bytes(b"%PDF-1.4\n")
        return output_path


class FailingPrinter(PdfPrinter):
    def print_to_file(self, html: str, output_path: Path) -> Path:
        raise RuntimeError("browser crashed")


class TestExportCvToPdf:
    """Tests for export_cv_to_pdf()."""

    def test_success(self, tmp_path, sample_cv, sample_profile, now):
        printer = FakePrinter()
        out = tmp_path / "cv.pdf"
        result = export_cv_to_pdf(sample_cv, sample_profile, out, anonymous=True, printer=printer, now=now)
        assert result == ExportResult(success=True, path=out)
        assert out.read_bytes().startswith(b"%PDF")
        assert "CV Anonyme" in printer.html
        assert "Pharmacie du Centre" not in printer.html

    def test_options_are_forwarded(self, tmp_path, sample_cv, sample_profile, now):
        printer = FakePrinter()
        export_cv_to_pdf(sample_cv, sample_profile, tmp_path / "cv.pdf", anonymous=False,
                         title="Dossier", email="pro@example.com", printer=printer, now=now)
        assert "<title>Dossier</title>" in printer.html
        assert "pro@example.com" in printer.html

    def test_printer_failure_is_reported(self, tmp_path, sample_cv, now):
        result = export_cv_to_pdf(sample_cv, None, tmp_path / "cv.pdf", printer=FailingPrinter(), now=now)
        assert result.success is False
        assert result.error == "browser crashed"
        assert result.path is None

    def test_missing_cv_is_reported(self, tmp_path):
        result = export_cv_to_pdf(None, None, tmp_path / "cv.pdf", printer=FakePrinter())
        assert result.success is False
        assert "No CV data" in result.error
