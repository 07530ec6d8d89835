import pytest

from services import pdf_loader
from services.errors import DocumentEmpty, DocumentUnavailable, ProfileDocumentError

PROFILE_TEXT = """Jane Doe
Engineer
Austin, Texas
Summary
Builds things.
Experience
Initech
Dev
Jan 2020 - Present
"""


def test_missing_file(tmp_path):
    with pytest.raises(DocumentUnavailable) as exc:
        pdf_loader.load_profile_text(tmp_path / "nope.pdf")
    assert isinstance(exc.value, ProfileDocumentError)
    assert exc.value.details["path"].endswith("nope.pdf")


def test_empty_file(tmp_path):
    pdf = tmp_path / "Profile.pdf"
    pdf.write_bytes(b"")
    with pytest.raises(DocumentEmpty):
        pdf_loader.load_profile_text(pdf)


def test_file_without_text(tmp_path, monkeypatch):
    pdf = tmp_path / "Profile.pdf"
    pdf.write_bytes(b"%PDF-1.4 scanned")
    monkeypatch.setattr(pdf_loader, "read_pdf_text", lambda data: "  \n ")
    with pytest.raises(DocumentEmpty):
        pdf_loader.load_profile_text(pdf)


def test_pdfminer_fallback(monkeypatch):
    def broken(data):
        raise ValueError("bad xref")

    monkeypatch.setattr(pdf_loader, "_pypdf_extract", broken)
    monkeypatch.setattr(pdf_loader, "_pdfminer_extract", lambda data: PROFILE_TEXT)
    assert pdf_loader.read_pdf_text(b"%PDF") == PROFILE_TEXT


def test_longer_text_wins(monkeypatch):
    monkeypatch.setattr(pdf_loader, "_pypdf_extract", lambda data: "short")
    monkeypatch.setattr(pdf_loader, "_pdfminer_extract", lambda data: PROFILE_TEXT)
    assert pdf_loader.read_pdf_text(b"%PDF") == PROFILE_TEXT


def test_get_resume_from_pdf(tmp_path, monkeypatch):
    (tmp_path / "Profile.pdf").write_bytes(b"%PDF-1.4")
    monkeypatch.setenv("PROFILE_PDF_DIR", str(tmp_path))
    monkeypatch.delenv("PROFILE_PDF_NAME", raising=False)
    monkeypatch.setattr(pdf_loader, "read_pdf_text", lambda data: PROFILE_TEXT)

    draft = pdf_loader.get_resume_from_pdf()
    assert draft.name == "Jane Doe"
    assert draft.experience[0].name == "Initech"

    with pytest.raises(DocumentUnavailable):
        pdf_loader.get_resume_from_pdf("Other.pdf")
