"""
Student service for the Student Management System
Students, their address and emergency contacts
"""

from flask import current_app
from database import db, handle_db_error
from models.student import Student, Address, EmergencyContact
from utils.db_helpers import add_and_commit, commit_or_raise, delete_and_commit, get_or_raise
from utils.validators import (
    ensure_valid, validate_name, validate_email, validate_phone, validate_title, parse_date
)

class StudentService:
    """Student service class"""
    
    UPDATABLE_FIELDS = ('first_name', 'last_name', 'email', 'phone', 'date_of_birth', 'major')
    
    @staticmethod
    @handle_db_error
    def add_student(student_data):
        """Add single student"""
        ensure_valid(
            validate_name(student_data.get('first_name'), 'First name'),
            validate_name(student_data.get('last_name'), 'Last name'),
            validate_email(student_data.get('email')),
            validate_phone(student_data.get('phone')),
            validate_title(student_data.get('major'), 'Major'),
        )
        
        student = Student(
            first_name=student_data['first_name'].strip(),
            last_name=student_data['last_name'].strip(),
            email=student_data['email'].strip().lower(),
            phone=student_data.get('phone'),
            date_of_birth=parse_date(student_data.get('date_of_birth'), 'Date of birth'),
            enrollment_date=parse_date(student_data.get('enrollment_date'), 'Enrollment date'),
            major=student_data['major'].strip(),
            total_credits=0
        )
        add_and_commit(student)
        current_app.logger.info("Student %s added: %s", student.student_id, student.full_name)
        return student
    
    @staticmethod
    def get_student(student_id):
        """Get student or raise RecordNotFoundError"""
        return get_or_raise(Student, student_id, 'Student')
    
    @staticmethod
    def search_students(search='', major=None):
        """List students matching a name/email fragment and optional major"""
        query = Student.query
        
        if search:
            query = query.filter(
                db.or_(
                    Student.first_name.contains(search),
                    Student.last_name.contains(search),
                    Student.email.contains(search)
                )
            )
        
        if major:
            query = query.filter_by(major=major)
        
        return query.order_by(Student.last_name, Student.first_name).all()
    
    @staticmethod
    @handle_db_error
    def update_student(student_id, changes):
        """Update the editable fields of a student"""
        student = get_or_raise(Student, student_id, 'Student')
        
        for field, value in changes.items():
            if field not in StudentService.UPDATABLE_FIELDS:
                continue
            if field in ('first_name', 'last_name'):
                ensure_valid(validate_name(value, field.replace('_', ' ').capitalize()))
            elif field == 'email':
                ensure_valid(validate_email(value))
                value = value.strip().lower()
            elif field == 'phone':
                ensure_valid(validate_phone(value))
            elif field == 'date_of_birth':
                value = parse_date(value, 'Date of birth')
            setattr(student, field, value)
        
        commit_or_raise()
        return student
    
    @staticmethod
    @handle_db_error
    def delete_student(student_id):
        """Delete a student.
        
        Grades, attendance, address, emergency contacts, fees, book issues and
        feedback go with the student; a linked user account is kept with its
        student_id set to null.
        """
        student = get_or_raise(Student, student_id, 'Student')
        delete_and_commit(student)
        current_app.logger.info("Student %s deleted with dependent records", student_id)
    
    @staticmethod
    @handle_db_error
    def set_address(student_id, address_data):
        """Create or replace the student's address"""
        student = get_or_raise(Student, student_id, 'Student')
        address = student.address or Address(student_id=student_id)
        
        for field in ('street', 'city', 'state', 'pin_code', 'country'):
            if field in address_data:
                setattr(address, field, address_data[field])
        
        return add_and_commit(address)
    
    @staticmethod
    @handle_db_error
    def add_emergency_contact(student_id, contact_data):
        """Add an emergency contact for a student"""
        ensure_valid(
            validate_name(contact_data.get('contact_name'), 'Contact name', max_length=100),
            validate_phone(contact_data.get('phone'), required=True),
            validate_email(contact_data.get('email'), required=False),
            validate_title(contact_data.get('relationship'), 'Relationship', max_length=50),
        )
        
        contact = EmergencyContact(
            student_id=student_id,
            contact_name=contact_data['contact_name'].strip(),
            relationship=contact_data['relationship'].strip(),
            phone=contact_data['phone'],
            email=contact_data.get('email')
        )
        return add_and_commit(contact)
