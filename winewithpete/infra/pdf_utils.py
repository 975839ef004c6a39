import io
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from winewithpete.domain.Package import Package
from winewithpete.domain.ShoppingList import ShoppingItem
from winewithpete.logic.shopping.aggregator import format_shopping_amount


def generate_pdf_for_shopping_list(package: Package, serving_size: int, items: List[ShoppingItem]) -> bytes:
    """Printable shopping list: Item / Amount / Unit / Notes for one package at one serving size."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=letter,
        rightMargin=36, leftMargin=36, topMargin=36, bottomMargin=36
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"{escape(package.name)} – Shopping List", styles["Title"]),
        Paragraph(f"Serves {serving_size}", styles["Heading3"]),
    ]
    if package.wine_pairing:
        elements.append(Paragraph(f"Wine pairing: {escape(package.wine_pairing)}", styles["Normal"]))
    elements.append(Spacer(1, 16))

    data = [["Item", "Amount", "Unit", "Notes"]]
    for it in items:
        data.append([it.item, format_shopping_amount(it.amount), it.unit, it.notes or ""])
    if len(data) == 1:
        data.append(["No shopping list available for this package.", "", "", ""])

    table = Table(data, repeatRows=1, colWidths=[200, 70, 70, 180])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#5B1A2E")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,1), (1,-1), "RIGHT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
