"""
Excel export service for the Student Management System
Writes the reporting views to xlsx workbooks
"""

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
from io import BytesIO
from datetime import date, datetime
from services.reporting_service import ReportingService

class ExcelExportService:
    """Service for exporting reports to Excel"""

    SHEET_TITLES = {
        'student_profile': 'Student Profile',
        'course_enrollment': 'Course Enrollment',
        'attendance_report': 'Attendance Report',
        'professor_courses': 'Professor Courses',
    }

    @staticmethod
    def create_workbook():
        """Create a new workbook with default styling"""
        wb = openpyxl.Workbook()
        return wb

    @staticmethod
    def style_header_row(ws, row_num, columns):
        """Apply styling to header row"""
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="000000", end_color="000000", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")

        for col_num, header in enumerate(columns, 1):
            cell = ws.cell(row=row_num, column=col_num, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment

    @staticmethod
    def auto_adjust_columns(ws):
        """Auto-adjust column widths"""
        for column in ws.columns:
            column_letter = get_column_letter(column[0].column)
            max_length = max(
                (len(str(cell.value)) for cell in column if cell.value is not None),
                default=0
            )
            ws.column_dimensions[column_letter].width = min(max_length + 2, 50)

    @staticmethod
    def format_number(value):
        """Format number: whole numbers without decimals, fractional numbers with 2 decimal places."""
        try:
            if value is None:
                return None
            num = float(value)
            if num == int(num):
                return int(num)  # 32.0 -> 32
            else:
                return round(num, 2)
        except (ValueError, TypeError):
            return value

    @staticmethod
    def format_cell_value(value):
        """Convert a view value into something openpyxl writes cleanly"""
        if value is None or isinstance(value, (str, date, datetime, bool)):
            return value
        return ExcelExportService.format_number(value)

    @staticmethod
    def write_rows(ws, columns, rows, start_row=1):
        """Write a header and one line per row dictionary"""
        ExcelExportService.style_header_row(ws, start_row, [c.replace('_', ' ').title() for c in columns])

        for row_offset, row in enumerate(rows, 1):
            for col_num, column in enumerate(columns, 1):
                cell = ws.cell(row=start_row + row_offset, column=col_num,
                               value=ExcelExportService.format_cell_value(row.get(column)))
                if isinstance(cell.value, date):
                    cell.number_format = 'yyyy-mm-dd'

        ExcelExportService.auto_adjust_columns(ws)

    @staticmethod
    def export_view(view_name, **filters):
        """Export one reporting view to an in-memory workbook"""
        rows = ReportingService.get_view(view_name, **filters)
        columns = ReportingService.VIEW_COLUMNS[view_name]

        wb = ExcelExportService.create_workbook()
        ws = wb.active
        ws.title = ExcelExportService.SHEET_TITLES[view_name]
        ExcelExportService.write_rows(ws, columns, rows)
        ws.freeze_panes = 'A2'

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output

    @staticmethod
    def export_all_views():
        """Export every view as its own sheet in one workbook"""
        wb = ExcelExportService.create_workbook()
        wb.remove(wb.active)

        for view_name, columns in ReportingService.VIEW_COLUMNS.items():
            ws = wb.create_sheet(ExcelExportService.SHEET_TITLES[view_name])
            ExcelExportService.write_rows(ws, columns, ReportingService.get_view(view_name))

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output
