"""
Academic service for the Student Management System
Departments, professors, teaching assistants and courses
"""

from flask import current_app
from database import handle_db_error
from models.academic import Department, Professor, TeachingAssistant, Course, SemesterOffered
from utils.db_helpers import add_and_commit, commit_or_raise, delete_and_commit, get_or_raise
from utils.validators import (
    ensure_valid, validate_name, validate_email, validate_phone,
    validate_course_code, validate_title, coerce_enum
)

class AcademicService:
    """Academic structure service class"""
    
    @staticmethod
    @handle_db_error
    def add_department(department_name, head_id=None):
        """Add a department, optionally with its head"""
        ensure_valid(validate_title(department_name, 'Department name'))
        if head_id is not None:
            get_or_raise(Professor, head_id, 'Professor')
        
        department = Department(department_name=department_name.strip(), department_head=head_id)
        add_and_commit(department)
        current_app.logger.info("Department %s added: %s", department.department_id, department.department_name)
        return department
    
    @staticmethod
    @handle_db_error
    def set_department_head(department_id, professor_id):
        """Assign (or clear, with None) the head of a department"""
        department = get_or_raise(Department, department_id, 'Department')
        department.head = get_or_raise(Professor, professor_id, 'Professor') if professor_id is not None else None
        commit_or_raise()
        return department
    
    @staticmethod
    @handle_db_error
    def add_professor(professor_data):
        """Add single professor"""
        ensure_valid(
            validate_name(professor_data.get('first_name'), 'First name'),
            validate_name(professor_data.get('last_name'), 'Last name'),
            validate_email(professor_data.get('email')),
            validate_phone(professor_data.get('phone')),
        )
        
        professor = Professor(
            first_name=professor_data['first_name'].strip(),
            last_name=professor_data['last_name'].strip(),
            email=professor_data['email'].strip().lower(),
            phone=professor_data.get('phone'),
            department=professor_data.get('department'),
            department_id=professor_data.get('department_id')
        )
        add_and_commit(professor)
        current_app.logger.info("Professor %s added: %s", professor.professor_id, professor.full_name)
        return professor
    
    @staticmethod
    @handle_db_error
    def delete_professor(professor_id):
        """Delete a professor.
        
        Departments they head, courses they teach, their teaching assistants and
        their user account are kept with the professor reference set to null.
        """
        professor = get_or_raise(Professor, professor_id, 'Professor')
        delete_and_commit(professor)
        current_app.logger.info("Professor %s deleted; dependent references nulled", professor_id)
    
    @staticmethod
    @handle_db_error
    def add_teaching_assistant(ta_data):
        """Add a teaching assistant, optionally attached to a professor"""
        ensure_valid(
            validate_name(ta_data.get('first_name'), 'First name'),
            validate_name(ta_data.get('last_name'), 'Last name'),
            validate_email(ta_data.get('email')),
            validate_phone(ta_data.get('phone')),
        )
        
        assistant = TeachingAssistant(
            first_name=ta_data['first_name'].strip(),
            last_name=ta_data['last_name'].strip(),
            email=ta_data['email'].strip().lower(),
            phone=ta_data.get('phone'),
            associated_professor_id=ta_data.get('associated_professor_id')
        )
        return add_and_commit(assistant)
    
    @staticmethod
    @handle_db_error
    def add_course(course_data):
        """Add a course.
        
        Credits are checked by the table (credits > 0), not here.
        """
        ensure_valid(
            validate_course_code(course_data.get('course_code')),
            validate_title(course_data.get('course_name'), 'Course name'),
        )
        
        course = Course(
            course_code=course_data['course_code'].strip().upper(),
            course_name=course_data['course_name'].strip(),
            credits=course_data.get('credits'),
            department=course_data.get('department'),
            semester_offered=coerce_enum(SemesterOffered, course_data.get('semester_offered'), 'Semester offered'),
            department_id=course_data.get('department_id'),
            professor_id=course_data.get('professor_id')
        )
        add_and_commit(course)
        current_app.logger.info("Course %s added: %s", course.course_code, course.course_name)
        return course
    
    @staticmethod
    def get_course(course_code):
        return get_or_raise(Course, course_code, 'Course')
    
    @staticmethod
    @handle_db_error
    def assign_professor(course_code, professor_id):
        """Set (or clear, with None) the professor teaching a course"""
        course = get_or_raise(Course, course_code, 'Course')
        course.professor = get_or_raise(Professor, professor_id, 'Professor') if professor_id is not None else None
        commit_or_raise()
        return course
    
    @staticmethod
    def get_courses_by_department(department_id=None):
        """Get courses, optionally for one department"""
        query = Course.query
        if department_id:
            query = query.filter_by(department_id=department_id)
        return query.order_by(Course.course_code).all()
