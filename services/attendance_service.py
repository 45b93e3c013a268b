"""
Attendance service for the Student Management System
"""

from datetime import date
from flask import current_app
from database import handle_db_error
from models.attendance import Attendance, AttendanceStatus
from utils.db_helpers import add_and_commit, bulk_insert
from utils.validators import coerce_enum, ensure_valid, parse_date, validate_course_code

class AttendanceService:
    """Attendance service class"""
    
    @staticmethod
    @handle_db_error
    def mark_attendance(student_id, course_code, status, attendance_date=None):
        """Record one day's status; a second status for the same day is a DuplicateKeyError"""
        ensure_valid(validate_course_code(course_code))
        record = Attendance(
            student_id=student_id,
            course_code=course_code,
            date=parse_date(attendance_date) or date.today(),
            status=coerce_enum(AttendanceStatus, status, 'Attendance status')
        )
        return add_and_commit(record)
    
    @staticmethod
    @handle_db_error
    def mark_course_attendance(course_code, attendance_date, statuses):
        """Record a whole class for one day from {student_id: status}"""
        ensure_valid(validate_course_code(course_code))
        day = parse_date(attendance_date) or date.today()
        records = [
            Attendance(
                student_id=student_id,
                course_code=course_code,
                date=day,
                status=coerce_enum(AttendanceStatus, status, 'Attendance status')
            )
            for student_id, status in statuses.items()
        ]
        count = bulk_insert(records)
        current_app.logger.info("Attendance for %s on %s recorded for %d students", course_code, day, count)
        return count
    
    @staticmethod
    def get_attendance_percentage(student_id, course_code, start_date=None, end_date=None):
        return Attendance.get_attendance_percentage(
            student_id, course_code, parse_date(start_date), parse_date(end_date)
        )
