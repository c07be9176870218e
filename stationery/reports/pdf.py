"""Render the stock report as a paginated A4 PDF"""
import io
from xml.sax.saxutils import escape

from django.conf import settings
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

HEADER_COLOR = colors.Color(249 / 255, 115 / 255, 22 / 255)
STRIPE_COLOR = colors.Color(0.96, 0.96, 0.96)

PAGE_MARGIN = 14 * mm
CONTENT_WIDTH = A4[0] - 2 * PAGE_MARGIN

INVENTORY_HEADER = ['Item Name', 'Category', 'Total Stock', 'Available', 'Unit', '% Available']
INVENTORY_COL_WIDTHS = [w * mm for w in (62, 30, 22, 22, 20, 26)]
CATEGORY_HEADER = ['Category', 'Number of Items', 'Total Available Stock']
CATEGORY_COL_WIDTHS = [w * mm for w in (62, 50, 70)]

# Item names wrap inside their column instead of running past the margin
CELL_STYLE = ParagraphStyle('InventoryCell', fontName='Helvetica', fontSize=9, leading=11)


def _striped_table(header, body, font_size, col_widths):
    # Header row repeats on every page the table spills onto
    table = Table([header] + body, colWidths=col_widths, repeatRows=1, hAlign='LEFT')
    style = [
        ('BACKGROUND', (0, 0), (-1, 0), HEADER_COLOR),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), font_size),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
    ]
    for row_index in range(2, len(body) + 1, 2):
        style.append(('BACKGROUND', (0, row_index), (-1, row_index), STRIPE_COLOR))
    table.setStyle(TableStyle(style))
    return table


def build_inventory_table(report):
    """Detailed inventory table, one row per item"""
    rows = [
        [Paragraph(escape(row['name']), CELL_STYLE), row['category'], str(row['totalStock']),
         str(row['availableStock']), Paragraph(escape(row['unit']), CELL_STYLE), row['percentDisplay']]
        for row in report['items']
    ]
    return _striped_table(INVENTORY_HEADER, rows, font_size=9, col_widths=INVENTORY_COL_WIDTHS)


def build_category_table(report):
    rows = [
        [entry['category'], str(entry['itemCount']), str(entry['totalAvailable'])]
        for entry in report['categories']
    ]
    return _striped_table(CATEGORY_HEADER, rows, font_size=10, col_widths=CATEGORY_COL_WIDTHS)


def render_stock_report_pdf(report):
    """Build the PDF bytes for a report produced by build_stock_report"""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4, title=report['title'],
        leftMargin=PAGE_MARGIN, rightMargin=PAGE_MARGIN, topMargin=15 * mm, bottomMargin=15 * mm,
    )
    styles = getSampleStyleSheet()
    summary = report['summary']

    story = [
        Paragraph(settings.STATIONERY_CONFIG['REPORT_TITLE'], styles['Title']),
        Paragraph(f"Generated: {report['generatedDate']} {report['generatedTime']}", styles['Normal']),
        Spacer(1, 6 * mm),
        Paragraph('Summary Statistics', styles['Heading2']),
        Paragraph(f"Total Items: {summary['totalItems']}", styles['Normal']),
        Paragraph(f"Total Available Stock: {summary['totalAvailableStock']} units", styles['Normal']),
        Paragraph(f"OP Stock Items: {summary['opStockItems']}", styles['Normal']),
        Paragraph(f"OP Non-Stock Items: {summary['opNonStockItems']}", styles['Normal']),
        Spacer(1, 6 * mm),
        Paragraph('Detailed Inventory', styles['Heading2']),
        build_inventory_table(report),
        Spacer(1, 8 * mm),
        Paragraph('Stock by Category', styles['Heading2']),
        build_category_table(report),
    ]

    doc.build(story)
    return buffer.getvalue()
