import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs."""
    document = docx.Document()
    document.add_paragraph("First paragraph of the manuscript.")
    document.add_paragraph("Second   paragraph\twith  spacing.")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def human_text() -> str:
    """Varied, marker-free prose long enough for every heuristic."""
    return (
        "The river froze early that year. "
        "Nobody in the village expected it, least of all the ferryman, who had "
        "already hauled his boat up the bank and was mending nets by the stove "
        "while his daughter read aloud from an almanac she had found in the attic. "
        "Snow came next. "
        "By the second week of November the mill had stopped, the road to town "
        "was buried under drifts taller than a horse, and the schoolteacher "
        "started holding lessons in the church because its stove burned hotter. "
        "Children loved it. "
        "Old Marta said she remembered a winter like this from her childhood, "
        "though her stories changed every time somebody asked about them. "
        "Spring, when it finally arrived, was sudden and muddy and glorious."
    )
