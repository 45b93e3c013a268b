"""
Validation utilities for the Student Management System
"""

import re
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from database import ValidationError

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')

def validate_name(name, field_name="Name", max_length=50):
    """Validate person name"""
    if not name or len(name.strip()) == 0:
        return False, f"{field_name} is required"

    if len(name) > max_length:
        return False, f"{field_name} must be {max_length} characters or less"

    # Allow letters, spaces, and common name characters
    if not re.match(r'^[A-Za-z\s\.\-\']+$', name):
        return False, f"{field_name} can only contain letters, spaces, periods, hyphens, and apostrophes"

    return True, f"Valid {field_name.lower()}"

def validate_email(email, required=True):
    """Validate email address"""
    if not email:
        return (False, "Email is required") if required else (True, "No email")

    if len(email) > 100:
        return False, "Email must be 100 characters or less"

    if not EMAIL_PATTERN.match(email):
        return False, "Email address is not valid"

    return True, "Valid email"

def validate_phone(phone, required=False):
    """Validate phone number"""
    if not phone:
        return (False, "Phone is required") if required else (True, "No phone")

    if len(phone) > 15:
        return False, "Phone must be 15 characters or less"

    if not re.match(r'^\+?[0-9\s\-]+$', phone):
        return False, "Phone can only contain digits, spaces, hyphens and a leading plus"

    return True, "Valid phone"

def validate_username(username):
    """Validate username format"""
    if not username or len(username.strip()) == 0:
        return False, "Username is required"

    if len(username) < 3:
        return False, "Username must be at least 3 characters long"

    if len(username) > 50:
        return False, "Username must be 50 characters or less"

    # Allow alphanumeric and underscore
    if not re.match(r'^[A-Za-z0-9_.]+$', username):
        return False, "Username can only contain letters, numbers, periods, and underscores"

    return True, "Valid username"

def validate_password(password):
    """Validate password strength"""
    if not password:
        return False, "Password is required"

    if len(password) < 6:
        return False, "Password must be at least 6 characters long"

    if len(password) > 128:
        return False, "Password must be 128 characters or less"

    return True, "Valid password"

def validate_course_code(course_code):
    """Validate course code format"""
    if not course_code or len(course_code.strip()) == 0:
        return False, "Course code is required"

    if len(course_code) > 10:
        return False, "Course code must be 10 characters or less"

    # Allow alphanumeric and some special characters
    if not re.match(r'^[A-Za-z0-9_-]+$', course_code):
        return False, "Course code can only contain letters, numbers, hyphens, and underscores"

    return True, "Valid course code"

def validate_semester(semester):
    """Validate semester number"""
    if semester is None:
        return True, "No semester"
    try:
        sem_int = int(semester)
        if sem_int < 1 or sem_int > 12:
            return False, "Semester must be between 1 and 12"
        return True, "Valid semester"
    except (ValueError, TypeError):
        return False, "Semester must be a number"

def validate_grade(grade):
    """Validate grade value (fits DECIMAL(3,2))"""
    if grade is None:
        return True, "No grade"
    try:
        value = Decimal(str(grade))
    except InvalidOperation:
        return False, "Grade must be a number"

    if value < 0:
        return False, "Grade cannot be negative"

    if value >= 10:
        return False, "Grade must be below 10.00"

    return True, "Valid grade"

def validate_amount(amount):
    """Validate fee amount (fits DECIMAL(10,2))"""
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return False, "Amount must be a number"

    if value < 0:
        return False, "Amount cannot be negative"

    if value >= Decimal('100000000'):
        return False, "Amount is too large"

    return True, "Valid amount"

def validate_date(date_value, field_name="Date"):
    """Validate date format"""
    try:
        if isinstance(date_value, str):
            datetime.strptime(date_value, '%Y-%m-%d')
        elif isinstance(date_value, date):
            pass  # Already a date object
        else:
            return False, f"{field_name} is not a valid date"

        return True, "Valid date"
    except ValueError:
        return False, f"{field_name} must be in YYYY-MM-DD format"

def parse_date(date_value, field_name="Date"):
    """Return a date object from a date or an ISO string; None passes through"""
    if date_value is None or isinstance(date_value, date):
        return date_value

    is_valid, message = validate_date(date_value, field_name)
    if not is_valid:
        raise ValidationError(message)
    return datetime.strptime(date_value, '%Y-%m-%d').date()

def coerce_enum(enum_cls, value, field_name):
    """Return the enum member for a member or its stored value"""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")

def ensure_valid(*results):
    """Raise ValidationError with the first failing (is_valid, message) result"""
    for is_valid, message in results:
        if not is_valid:
            raise ValidationError(message)

def validate_title(value, field_name="Title", max_length=100):
    """Validate free-text names such as course, department or book titles"""
    if not value or len(str(value).strip()) == 0:
        return False, f"{field_name} is required"

    if len(str(value)) > max_length:
        return False, f"{field_name} must be {max_length} characters or less"

    return True, f"Valid {field_name.lower()}"
