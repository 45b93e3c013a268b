#!/usr/bin/env python3
"""
Export a reporting view to an Excel workbook or a PDF.

Usage:
  python export_reports.py student_profile
  python export_reports.py attendance_report --course-code CS101 --output cs101.xlsx
  python export_reports.py professor_courses --format pdf
  python export_reports.py all --output reports.xlsx
"""

import argparse
import os
import sys
from app import create_app
from services.excel_export_service import ExcelExportService
from services.pdf_export_service import PdfExportService
from services.reporting_service import ReportingService

def build_filters(view_name, args):
    """Pick the filters that apply to the chosen view"""
    accepted = {
        'student_profile': ('student_id',),
        'course_enrollment': ('course_code',),
        'attendance_report': ('student_id', 'course_code'),
        'professor_courses': ('professor_id',),
    }[view_name]
    return {name: getattr(args, name) for name in accepted if getattr(args, name) is not None}

def main():
    parser = argparse.ArgumentParser(description="Export a reporting view to xlsx or pdf")
    parser.add_argument('view', choices=list(ReportingService.VIEW_COLUMNS) + ['all'])
    parser.add_argument('--format', choices=['xlsx', 'pdf'], default='xlsx')
    parser.add_argument('--output', help='file to write (default: exports/<view>.<format>)')
    parser.add_argument('--student-id', type=int)
    parser.add_argument('--course-code')
    parser.add_argument('--professor-id', type=int)
    args = parser.parse_args()
    
    if args.view == 'all' and args.format == 'pdf':
        print("PDF export covers one view at a time")
        sys.exit(1)
    
    app = create_app()
    output_path = args.output or os.path.join(app.config['EXPORT_FOLDER'], f'{args.view}.{args.format}')
    
    with app.app_context():
        if args.view == 'all':
            content = ExcelExportService.export_all_views().getvalue()
        elif args.format == 'pdf':
            content = PdfExportService.export_view(args.view, **build_filters(args.view, args))
        else:
            content = ExcelExportService.export_view(args.view, **build_filters(args.view, args)).getvalue()
    
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, 'wb') as handle:
        handle.write(content)
    print(f"Wrote {output_path}")

if __name__ == '__main__':
    main()
