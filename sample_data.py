#!/usr/bin/env python3
"""
Sample data generator for the Student Management System
Creates sample data for testing and demonstration
"""

from datetime import date, timedelta
from app import create_app
from models.account import UserRole
from models.attendance import AttendanceStatus
from models.fees import FeeStatus
from services.academic_service import AcademicService
from services.account_service import AccountService
from services.attendance_service import AttendanceService
from services.feedback_service import FeedbackService
from services.fee_service import FeeService
from services.grade_service import GradeService
from services.library_service import LibraryService
from services.student_service import StudentService

def load_sample_data():
    """Create sample data inside the current application context"""
    print("Creating sample data...")

    # Departments and professors
    cs = AcademicService.add_department('Computer Science')
    maths = AcademicService.add_department('Mathematics')

    professors = [
        AcademicService.add_professor({'first_name': 'Alan', 'last_name': 'Turing',
                                       'email': 'turing@example.edu', 'department': 'Computer Science',
                                       'department_id': cs.department_id}),
        AcademicService.add_professor({'first_name': 'Emmy', 'last_name': 'Noether',
                                       'email': 'noether@example.edu', 'department': 'Mathematics',
                                       'department_id': maths.department_id}),
    ]
    AcademicService.set_department_head(cs.department_id, professors[0].professor_id)
    AcademicService.set_department_head(maths.department_id, professors[1].professor_id)
    AcademicService.add_teaching_assistant({'first_name': 'Grace', 'last_name': 'Hopper',
                                            'email': 'hopper@example.edu',
                                            'associated_professor_id': professors[0].professor_id})
    print(f"✓ Created 2 departments and {len(professors)} professors")

    # Courses
    courses_data = [
        {'course_code': 'CS101', 'course_name': 'Programming Fundamentals', 'credits': 4,
         'semester_offered': 'Odd', 'department_id': cs.department_id,
         'professor_id': professors[0].professor_id},
        {'course_code': 'CS201', 'course_name': 'Database Systems', 'credits': 3,
         'semester_offered': 'Even', 'department_id': cs.department_id,
         'professor_id': professors[0].professor_id},
        {'course_code': 'MA101', 'course_name': 'Linear Algebra', 'credits': 3,
         'semester_offered': 'Both', 'department_id': maths.department_id,
         'professor_id': professors[1].professor_id},
    ]
    courses = [AcademicService.add_course(data) for data in courses_data]
    print(f"✓ Created {len(courses)} courses")

    # Students
    students_data = [
        {'first_name': 'Ada', 'last_name': 'Lovelace', 'email': 'ada@example.edu',
         'enrollment_date': date(2024, 8, 1), 'major': 'Computer Science'},
        {'first_name': 'Carl', 'last_name': 'Gauss', 'email': 'carl@example.edu',
         'enrollment_date': date(2024, 8, 1), 'major': 'Mathematics'},
        {'first_name': 'Katherine', 'last_name': 'Johnson', 'email': 'katherine@example.edu',
         'enrollment_date': date(2025, 1, 15), 'major': 'Mathematics'},
    ]
    students = [StudentService.add_student(data) for data in students_data]
    for student in students:
        StudentService.set_address(student.student_id, {'city': 'Springfield', 'country': 'USA'})
        StudentService.add_emergency_contact(student.student_id, {
            'contact_name': f'{student.last_name} Family', 'relationship': 'Parent',
            'phone': '555-0100'
        })
        AccountService.create_account(student.email.split('@')[0], 'student123',
                                      UserRole.STUDENT, student_id=student.student_id)
    print(f"✓ Created {len(students)} students with addresses, contacts and accounts")

    # Grades (total credits follow automatically)
    GradeService.record_grade(students[0].student_id, 'CS101', semester=1, grade=3.8)
    GradeService.record_grade(students[0].student_id, 'MA101', semester=1, grade=3.5)
    GradeService.record_grade(students[1].student_id, 'MA101', semester=1, grade=4.0)
    GradeService.record_grade(students[2].student_id, 'CS201', semester=2, grade=3.2)
    print("✓ Recorded grades")

    # A week of attendance for CS101
    start = date.today() - timedelta(days=7)
    for offset in range(5):
        AttendanceService.mark_attendance(
            students[0].student_id, 'CS101',
            AttendanceStatus.ABSENT if offset == 2 else AttendanceStatus.PRESENT,
            start + timedelta(days=offset)
        )
    print("✓ Marked attendance")

    # Fees
    FeeService.add_fee(students[0].student_id, 1500, date.today() + timedelta(days=30), FeeStatus.PENDING)
    FeeService.add_fee(students[1].student_id, 1500, date.today() - timedelta(days=10), FeeStatus.PENDING)
    FeeService.add_fee(students[2].student_id, 1500, date.today() - timedelta(days=40), FeeStatus.PAID)
    print("✓ Charged fees")

    # Library
    book = LibraryService.add_book({'title': 'Structure and Interpretation of Computer Programs',
                                    'author': 'Abelson and Sussman', 'isbn': '9780262510875',
                                    'available_copies': 2})
    LibraryService.issue_book(students[0].student_id, book.book_id)
    print("✓ Added library book and issued a copy")

    FeedbackService.submit_feedback(students[0].student_id, 'CS101', rating=5, comments='Great course')
    print("✓ Recorded feedback")
    print("Sample data created successfully!")

def create_sample_data():
    """Create sample data for the system"""
    app = create_app()
    with app.app_context():
        load_sample_data()

if __name__ == '__main__':
    create_sample_data()
