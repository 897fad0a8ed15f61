import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from bulkbasket.utilities.constants import DEPARTMENTS


def generate_pdf_for_shopping_list(organized):
    """Render an OrganizedShoppingList as a PDF: one table row per item, grouped by department."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Shopping List", styles["Title"]),
        Paragraph(f"Estimated bulk savings: ${organized.total_savings:.2f}", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Department", "Item"]]
    for department in DEPARTMENTS:
        for line in organized.sections.get(department, []):
            data.append([department.capitalize(), line])
    if len(data) == 1:
        data.append(["-", "Nothing to buy"])

    table = Table(data, repeatRows=1, colWidths=[90, 440])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (0,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    if organized.high_value_items:
        elements.append(Spacer(1, 12))
        elements.append(Paragraph(
            "Priority items: " + escape(", ".join(organized.high_value_items)), styles["Normal"]
        ))

    doc.build(elements)
    return buf.getvalue()
