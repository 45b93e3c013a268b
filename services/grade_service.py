"""
Grade service for the Student Management System
Grade writes and the derived students.total_credits value
"""

from decimal import Decimal
from flask import current_app
from sqlalchemy import func
from database import db, handle_db_error
from models.academic import Course
from models.grades import Grade
from models.student import Student
from utils.db_helpers import commit_or_raise, flush_or_raise, get_or_raise
from utils.validators import ensure_valid, validate_course_code, validate_grade, validate_semester

class GradeService:
    """Grade service class"""
    
    @staticmethod
    def calculate_total_credits(student_id):
        """Sum of credits over every course the student has a grade row for"""
        total = (
            db.session.query(func.coalesce(func.sum(Course.credits), 0))
            .join(Grade, Grade.course_code == Course.course_code)
            .filter(Grade.student_id == student_id)
            .scalar()
        )
        return int(total)
    
    @staticmethod
    def recompute_total_credits(student_id):
        """Overwrite students.total_credits from the current grade rows.
        
        Runs inside the caller's transaction; the caller commits. Always a full
        recompute so inserts, course changes and removals all stay consistent.
        """
        student = db.session.get(Student, student_id)
        if student is None:
            return None
        
        student.total_credits = GradeService.calculate_total_credits(student_id)
        current_app.logger.info("Total credits for student %s recomputed: %s",
                                student_id, student.total_credits)
        return student.total_credits
    
    @staticmethod
    @handle_db_error
    def record_grade(student_id, course_code, semester=None, grade=None):
        """Insert a grade row and refresh the student's total credits.
        
        Raises ForeignKeyViolation for an unknown student or course and
        DuplicateKeyError when the student already has a grade for the course.
        """
        ensure_valid(
            validate_course_code(course_code),
            validate_semester(semester),
            validate_grade(grade),
        )
        
        record = Grade(
            student_id=student_id,
            course_code=course_code,
            semester=int(semester) if semester is not None else None,
            grade=Decimal(str(grade)) if grade is not None else None
        )
        db.session.add(record)
        flush_or_raise()
        
        GradeService.recompute_total_credits(student_id)
        commit_or_raise()
        current_app.logger.info("Grade recorded: student %s, course %s", student_id, course_code)
        return record
    
    @staticmethod
    @handle_db_error
    def update_grade(student_id, course_code, semester=None, grade=None, new_course_code=None):
        """Change a grade row; moving it to another course refreshes total credits"""
        record = get_or_raise(Grade, (student_id, course_code), 'Grade')
        ensure_valid(validate_semester(semester), validate_grade(grade))
        
        if semester is not None:
            record.semester = int(semester)
        if grade is not None:
            record.grade = Decimal(str(grade))
        if new_course_code and new_course_code != course_code:
            ensure_valid(validate_course_code(new_course_code))
            record.course_code = new_course_code
            flush_or_raise()
            GradeService.recompute_total_credits(student_id)
        
        commit_or_raise()
        return record
    
    @staticmethod
    @handle_db_error
    def remove_grade(student_id, course_code):
        """Delete a grade row and refresh the student's total credits"""
        record = get_or_raise(Grade, (student_id, course_code), 'Grade')
        db.session.delete(record)
        flush_or_raise()
        
        GradeService.recompute_total_credits(student_id)
        commit_or_raise()
        current_app.logger.info("Grade removed: student %s, course %s", student_id, course_code)
    
    @staticmethod
    def get_transcript(student_id):
        """Grade rows for a student as dictionaries"""
        return [record.to_dict() for record in Grade.get_student_grades(student_id)]
