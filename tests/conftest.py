import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

SALARY_SLIP_LINES = (
    "SALARY CERTIFICATE",
    "Employee Name: Jane Doe",
    "Basic Salary: AED 12,000",
    "Housing Allowance: AED 5,000",
    "Net Salary: AED 18,500",
)


@pytest.fixture()
def salary_pdf_bytes() -> bytes:
    """Generate a single-page salary certificate with a text layer."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    y = 780
    for line in SALARY_SLIP_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 780, "Page one: Basic Salary AED 12,000")
    c.showPage()
    c.drawString(72, 780, "Page two: Net Salary AED 18,500")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (a scanned-looking blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()
