# storefront/utils/pdf_generators/quotation_pdf.py
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from storefront.models.quotation_models import Quotation

COMPANY_NAME = "Al Wathba Auto Parts"
CURRENCY = "AED"


def _money(value) -> str:
    return f"{CURRENCY} {value:,.2f}"


def generate_quotation_pdf(quotation: Quotation) -> bytes:
    """Render a quotation with its line items and totals as an A4 PDF."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, title=f"Quotation {quotation.quotation_number}")
    styles = getSampleStyleSheet()

    elements = [
        Paragraph(COMPANY_NAME, styles["Title"]),
        Paragraph(f"Quotation <b>{quotation.quotation_number}</b>", styles["Heading2"]),
        Spacer(1, 12),
        Paragraph(f"Customer: {escape(quotation.customer_name)}", styles["Normal"]),
        Paragraph(f"Email: {escape(quotation.customer_email)}", styles["Normal"]),
        Paragraph(f"Phone: {escape(quotation.customer_phone)}", styles["Normal"]),
    ]
    if quotation.customer_company:
        elements.append(Paragraph(f"Company: {escape(quotation.customer_company)}", styles["Normal"]))
    if quotation.valid_until:
        elements.append(Paragraph(f"Valid until: {quotation.valid_until:%Y-%m-%d}", styles["Normal"]))
    elements.append(Paragraph(f"Status: {quotation.status.value.capitalize()}", styles["Normal"]))
    elements.append(Spacer(1, 18))

    rows = [["#", "Product", "Qty", "Unit price", "Total"]]
    for idx, item in enumerate(quotation.items, start=1):
        rows.append([
            str(idx),
            item.product_name,
            str(item.quantity),
            _money(item.unit_price),
            _money(item.total_price),
        ])
    rows.append(["", "", "", "Subtotal", _money(quotation.total_amount)])
    rows.append(["", "", "", "Tax", _money(quotation.tax_amount)])
    rows.append(["", "", "", "Total", _money(quotation.final_amount)])

    table = Table(rows, colWidths=[25, 225, 40, 100, 100])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1f2937")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -4), 0.5, colors.grey),
        ("FONTNAME", (3, -1), (-1, -1), "Helvetica-Bold"),
        ("LINEABOVE", (3, -3), (-1, -3), 0.75, colors.black),
    ]))
    elements.append(table)

    if quotation.notes:
        elements.append(Spacer(1, 18))
        elements.append(Paragraph(f"Notes: {escape(quotation.notes)}", styles["Normal"]))

    doc.build(elements)
    return buffer.getvalue()
