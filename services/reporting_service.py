"""
Reporting service for the Student Management System
The student_profile, course_enrollment, attendance_report and
professor_courses views, expressed as queries
"""

import enum
from decimal import Decimal
from database import db, ValidationError
from models.academic import Course, Professor
from models.attendance import Attendance
from models.fees import Fee, FeeStatus
from models.grades import Grade
from models.library import BookIssue
from models.student import Student

class ReportingService:
    """Reporting service class"""
    
    VIEW_COLUMNS = {
        'student_profile': ['student_id', 'first_name', 'last_name', 'email',
                            'course_code', 'grade', 'course_name', 'credits'],
        'course_enrollment': ['student_id', 'first_name', 'last_name', 'course_code', 'course_name'],
        'attendance_report': ['student_id', 'first_name', 'last_name', 'course_code', 'date', 'status'],
        'professor_courses': ['professor_id', 'first_name', 'last_name', 'course_code', 'course_name'],
    }
    
    @staticmethod
    def _rows(query):
        """Materialize a query as plain dictionaries"""
        rows = []
        for row in query:
            record = {}
            for key, value in row._mapping.items():
                if isinstance(value, Decimal):
                    value = float(value)
                elif isinstance(value, enum.Enum):
                    value = value.value
                record[key] = value
            rows.append(record)
        return rows
    
    @staticmethod
    def student_profile(student_id=None):
        """Every student with each graded course; students without grades appear once with nulls"""
        query = (
            db.session.query(
                Student.student_id, Student.first_name, Student.last_name, Student.email,
                Grade.course_code, Grade.grade, Course.course_name, Course.credits
            )
            .select_from(Student)
            .outerjoin(Grade, Student.student_id == Grade.student_id)
            .outerjoin(Course, Grade.course_code == Course.course_code)
        )
        if student_id is not None:
            query = query.filter(Student.student_id == student_id)
        return ReportingService._rows(query.order_by(Student.student_id, Grade.course_code))
    
    @staticmethod
    def course_enrollment(course_code=None):
        """Students with a grade row in each course"""
        query = (
            db.session.query(
                Student.student_id, Student.first_name, Student.last_name,
                Grade.course_code, Course.course_name
            )
            .select_from(Student)
            .join(Grade, Student.student_id == Grade.student_id)
            .join(Course, Grade.course_code == Course.course_code)
        )
        if course_code is not None:
            query = query.filter(Grade.course_code == course_code)
        return ReportingService._rows(query.order_by(Grade.course_code, Student.student_id))
    
    @staticmethod
    def attendance_report(student_id=None, course_code=None):
        """Attendance rows with the student's name"""
        query = (
            db.session.query(
                Attendance.student_id, Student.first_name, Student.last_name,
                Attendance.course_code, Attendance.date, Attendance.status
            )
            .select_from(Attendance)
            .join(Student, Attendance.student_id == Student.student_id)
        )
        if student_id is not None:
            query = query.filter(Attendance.student_id == student_id)
        if course_code is not None:
            query = query.filter(Attendance.course_code == course_code)
        return ReportingService._rows(
            query.order_by(Attendance.date, Attendance.course_code, Attendance.student_id)
        )
    
    @staticmethod
    def professor_courses(professor_id=None):
        """Professors with the courses they teach"""
        query = (
            db.session.query(
                Professor.professor_id, Professor.first_name, Professor.last_name,
                Course.course_code, Course.course_name
            )
            .select_from(Professor)
            .join(Course, Professor.professor_id == Course.professor_id)
        )
        if professor_id is not None:
            query = query.filter(Professor.professor_id == professor_id)
        return ReportingService._rows(query.order_by(Professor.professor_id, Course.course_code))
    
    @staticmethod
    def get_view(view_name, **filters):
        """Run a view by name with its keyword filters"""
        if view_name not in ReportingService.VIEW_COLUMNS:
            raise ValidationError(
                f"Unknown view '{view_name}'. Choose from: {', '.join(ReportingService.VIEW_COLUMNS)}"
            )
        return getattr(ReportingService, view_name)(**filters)
    
    @staticmethod
    def attendance_percentage(student_id, course_code):
        """Share of Present days for a student in a course"""
        return Attendance.get_attendance_percentage(student_id, course_code)
    
    @staticmethod
    def get_dashboard_stats():
        """Headline counts across the system"""
        return {
            'total_students': Student.query.count(),
            'total_courses': Course.query.count(),
            'total_professors': Professor.query.count(),
            'open_book_issues': BookIssue.query.filter(BookIssue.return_date.is_(None)).count(),
            'overdue_fees': Fee.query.filter(Fee.status == FeeStatus.OVERDUE).count(),
            'pending_fees': Fee.query.filter(Fee.status == FeeStatus.PENDING).count(),
        }
