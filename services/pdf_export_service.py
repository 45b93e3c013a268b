"""
PDF export service for the Student Management System
Renders a reporting view as a single table on A4 pages
"""

from io import BytesIO
from xml.sax.saxutils import escape as xml_escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from services.excel_export_service import ExcelExportService
from services.reporting_service import ReportingService

class PdfExportService:
    """Service for exporting reports to PDF"""

    MARGIN = 18 * mm

    @staticmethod
    def _cell_style():
        """Compact cell style so long values wrap inside the column"""
        styles = getSampleStyleSheet()
        return ParagraphStyle('Cell', parent=styles['Normal'], fontSize=9, leading=11,
                              spaceAfter=0, spaceBefore=0)

    @staticmethod
    def _header_style():
        styles = getSampleStyleSheet()
        return ParagraphStyle('HeaderCell', parent=styles['Normal'], fontSize=9, leading=11,
                              textColor=colors.white, spaceAfter=0, spaceBefore=0)

    @staticmethod
    def _to_paragraph(value, style):
        if value is None:
            return Paragraph('', style)
        return Paragraph(xml_escape(str(value)).replace('\n', '<br/>'), style)

    @staticmethod
    def build_table_data(columns, rows):
        """Header labels followed by one list of Paragraphs per row"""
        header_style = PdfExportService._header_style()
        cell_style = PdfExportService._cell_style()

        data = [[PdfExportService._to_paragraph(c.replace('_', ' ').title(), header_style) for c in columns]]
        for row in rows:
            data.append([
                PdfExportService._to_paragraph(ExcelExportService.format_cell_value(row.get(column)), cell_style)
                for column in columns
            ])
        if not rows:
            data.append([PdfExportService._to_paragraph('No data', cell_style)] +
                        [PdfExportService._to_paragraph(None, cell_style)] * (len(columns) - 1))
        return data

    @staticmethod
    def export_view(view_name, **filters):
        """Export one reporting view as PDF bytes"""
        rows = ReportingService.get_view(view_name, **filters)
        columns = ReportingService.VIEW_COLUMNS[view_name]

        pagesize = landscape(A4) if len(columns) > 6 else A4
        margin = PdfExportService.MARGIN
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=pagesize, leftMargin=margin, rightMargin=margin,
                                topMargin=margin, bottomMargin=margin)
        styles = getSampleStyleSheet()

        page_width = pagesize[0] - 2 * margin
        table = Table(PdfExportService.build_table_data(columns, rows), repeatRows=1,
                      colWidths=[page_width / len(columns)] * len(columns))
        table.setStyle(TableStyle([
            ('BOX', (0, 0), (-1, -1), 0.5, colors.grey),
            ('INNERGRID', (0, 0), (-1, -1), 0.25, colors.lightgrey),
            ('BACKGROUND', (0, 0), (-1, 0), colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ]))

        elements = [
            Paragraph(ExcelExportService.SHEET_TITLES[view_name], styles['Heading2']),
            Spacer(1, 6),
            table,
        ]
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes
