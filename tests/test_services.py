"""
Unit tests for service classes
"""

import unittest
from datetime import date, timedelta
from app import create_app
from config import TestingConfig
from database import (
    db, BookAlreadyIssuedError, CheckViolation, DuplicateKeyError,
    ForeignKeyViolation, NoCopiesAvailableError, RecordNotFoundError, ValidationError
)
from models.account import UserAccount, UserRole, Notification
from models.academic import Course, Department, Professor, TeachingAssistant
from models.attendance import Attendance, AttendanceStatus
from models.fees import Fee, FeeStatus
from models.feedback import Feedback
from models.grades import Grade
from models.library import Book, BookIssue
from models.student import Student, Address, EmergencyContact
from services.academic_service import AcademicService
from services.account_service import AccountService
from services.attendance_service import AttendanceService
from services.feedback_service import FeedbackService
from services.fee_service import FeeService
from services.grade_service import GradeService
from services.library_service import LibraryService
from services.student_service import StudentService

class ServiceTestCase(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures"""
        self.app = create_app(TestingConfig)
        self.app_context = self.app.app_context()
        self.app_context.push()
        db.create_all()

    def tearDown(self):
        """Clean up after tests"""
        db.session.remove()
        db.drop_all()
        self.app_context.pop()

    def add_student(self, first_name='Ada', email='ada@example.edu'):
        return StudentService.add_student({
            'first_name': first_name,
            'last_name': 'Lovelace',
            'email': email,
            'enrollment_date': '2024-08-01',
            'major': 'Computer Science'
        })

    def add_course(self, code='CS101', credits=4, professor_id=None):
        return AcademicService.add_course({
            'course_code': code,
            'course_name': f'Course {code}',
            'credits': credits,
            'semester_offered': 'Odd',
            'professor_id': professor_id
        })

    def add_professor(self, email='turing@example.edu'):
        return AcademicService.add_professor({
            'first_name': 'Alan',
            'last_name': 'Turing',
            'email': email
        })

class TestStudentService(ServiceTestCase):

    def test_add_student(self):
        """Test adding student through student service"""
        student = self.add_student()

        stored = Student.query.filter_by(email='ada@example.edu').first()
        self.assertIsNotNone(stored)
        self.assertEqual(stored.student_id, student.student_id)
        self.assertEqual(stored.enrollment_date, date(2024, 8, 1))
        self.assertEqual(stored.total_credits, 0)

    def test_add_student_validation(self):
        with self.assertRaises(ValidationError):
            StudentService.add_student({'first_name': '', 'last_name': 'X', 'email': 'x@example.edu',
                                        'enrollment_date': '2024-08-01', 'major': 'Art'})
        with self.assertRaises(ValidationError):
            StudentService.add_student({'first_name': 'X', 'last_name': 'Y', 'email': 'not-an-email',
                                        'enrollment_date': '2024-08-01', 'major': 'Art'})
        with self.assertRaises(ValidationError):
            StudentService.add_student({'first_name': 'X', 'last_name': 'Y', 'email': 'x@example.edu',
                                        'enrollment_date': '01/08/2024', 'major': 'Art'})

    def test_enrollment_date_is_required(self):
        with self.assertRaises(CheckViolation):
            StudentService.add_student({'first_name': 'X', 'last_name': 'Y', 'email': 'x@example.edu',
                                        'major': 'Art'})

    def test_update_student(self):
        student = self.add_student()
        StudentService.update_student(student.student_id, {'phone': '555-0101', 'major': 'Mathematics',
                                                           'total_credits': 99})

        stored = StudentService.get_student(student.student_id)
        self.assertEqual(stored.phone, '555-0101')
        self.assertEqual(stored.major, 'Mathematics')
        self.assertEqual(stored.total_credits, 0)

    def test_search_students(self):
        self.add_student()
        self.add_student(first_name='Grace', email='grace@example.edu')

        self.assertEqual(len(StudentService.search_students('grace')), 1)
        self.assertEqual(len(StudentService.search_students(major='Computer Science')), 2)

    def test_get_missing_student(self):
        with self.assertRaises(RecordNotFoundError):
            StudentService.get_student(404)

    def test_set_address_replaces_existing(self):
        student = self.add_student()
        StudentService.set_address(student.student_id, {'city': 'London', 'country': 'UK'})
        StudentService.set_address(student.student_id, {'city': 'Paris'})

        address = db.session.get(Address, student.student_id)
        self.assertEqual(address.city, 'Paris')
        self.assertEqual(address.country, 'UK')
        self.assertEqual(Address.query.count(), 1)

    def test_delete_student_cascades(self):
        """Deleting a student removes dependants and keeps the account with a null link"""
        student = self.add_student()
        sid = student.student_id
        self.add_course()
        book = LibraryService.add_book({'title': 'Dune', 'available_copies': 2})

        GradeService.record_grade(sid, 'CS101', semester=1, grade=3.5)
        AttendanceService.mark_attendance(sid, 'CS101', 'Present', date(2025, 1, 10))
        StudentService.set_address(sid, {'city': 'London'})
        StudentService.add_emergency_contact(sid, {'contact_name': 'Lord Byron', 'relationship': 'Parent',
                                                   'phone': '555-0100'})
        FeeService.add_fee(sid, 100, date(2025, 2, 1))
        LibraryService.issue_book(sid, book.book_id)
        FeedbackService.submit_feedback(sid, 'CS101', rating=4)
        account = AccountService.create_account('ada', 'secret123', UserRole.STUDENT, student_id=sid)
        user_id = account.user_id

        StudentService.delete_student(sid)

        self.assertIsNone(db.session.get(Student, sid))
        for model in (Grade, Attendance, Address, EmergencyContact, Fee, BookIssue, Feedback):
            self.assertEqual(model.query.filter_by(student_id=sid).count(), 0, model.__name__)

        account = db.session.get(UserAccount, user_id)
        self.assertIsNotNone(account)
        self.assertIsNone(account.student_id)

        # catalogue and course are untouched
        self.assertIsNotNone(db.session.get(Book, book.book_id))
        self.assertIsNotNone(db.session.get(Course, 'CS101'))

class TestAcademicService(ServiceTestCase):

    def test_create_course(self):
        """Test creating course through academic service"""
        self.add_course('cs201', credits=3)

        course = db.session.get(Course, 'CS201')
        self.assertIsNotNone(course)
        self.assertEqual(course.credits, 3)

    def test_course_credits_checked_by_table(self):
        with self.assertRaises(CheckViolation):
            self.add_course('CS000', credits=0)

    def test_course_code_too_long(self):
        with self.assertRaises(ValidationError):
            self.add_course('CS101-EXTENDED')

    def test_invalid_semester_offered(self):
        with self.assertRaises(ValidationError):
            AcademicService.add_course({'course_code': 'CS102', 'course_name': 'X', 'credits': 3,
                                        'semester_offered': 'Summer'})

    def test_delete_professor_nulls_references(self):
        """Department head, course, TA and account survive with a null professor reference"""
        professor = self.add_professor()
        pid = professor.professor_id
        department = AcademicService.add_department('Computer Science', head_id=pid)
        department_id = department.department_id
        self.add_course('CS101', professor_id=pid)
        assistant = AcademicService.add_teaching_assistant({
            'first_name': 'Grace', 'last_name': 'Hopper', 'email': 'hopper@example.edu',
            'associated_professor_id': pid
        })
        ta_id = assistant.ta_id
        account = AccountService.create_account('turing', 'secret123', 'Professor', professor_id=pid)
        user_id = account.user_id

        AcademicService.delete_professor(pid)
        db.session.expire_all()

        self.assertIsNone(db.session.get(Professor, pid))
        department = db.session.get(Department, department_id)
        self.assertIsNotNone(department)
        self.assertIsNone(department.department_head)
        course = db.session.get(Course, 'CS101')
        self.assertIsNotNone(course)
        self.assertIsNone(course.professor_id)
        self.assertIsNone(db.session.get(TeachingAssistant, ta_id).associated_professor_id)
        self.assertIsNone(db.session.get(UserAccount, user_id).professor_id)

    def test_set_department_head_and_assign_professor(self):
        professor = self.add_professor()
        department = AcademicService.add_department('Mathematics')
        self.add_course('MA101')

        AcademicService.set_department_head(department.department_id, professor.professor_id)
        AcademicService.assign_professor('MA101', professor.professor_id)

        self.assertEqual(db.session.get(Department, department.department_id).head, professor)
        self.assertEqual([c.course_code for c in professor.courses], ['MA101'])

        AcademicService.assign_professor('MA101', None)
        self.assertIsNone(db.session.get(Course, 'MA101').professor_id)

    def test_unknown_department_head(self):
        with self.assertRaises(RecordNotFoundError):
            AcademicService.add_department('History', head_id=999)

class TestGradeService(ServiceTestCase):

    def test_grade_for_unknown_student_or_course(self):
        """Inserting a grade with a dangling reference is a foreign-key violation"""
        student = self.add_student()
        self.add_course()

        with self.assertRaises(ForeignKeyViolation):
            GradeService.record_grade(9999, 'CS101', semester=1, grade=3.0)
        with self.assertRaises(ForeignKeyViolation):
            GradeService.record_grade(student.student_id, 'NOPE1', semester=1, grade=3.0)
        self.assertEqual(Grade.query.count(), 0)

    def test_duplicate_grade(self):
        """Two grade rows for the same student and course violate the primary key"""
        student = self.add_student()
        sid = student.student_id
        self.add_course()

        GradeService.record_grade(sid, 'CS101', semester=1, grade=3.0)
        db.session.expunge_all()
        with self.assertRaises(DuplicateKeyError):
            GradeService.record_grade(sid, 'CS101', semester=2, grade=3.5)
        self.assertEqual(Grade.query.count(), 1)

    def test_total_credits_follow_grade_rows(self):
        student = self.add_student()
        sid = student.student_id
        self.add_course('CS101', credits=4)
        self.add_course('MA101', credits=3)

        GradeService.record_grade(sid, 'CS101', semester=1, grade=3.0)
        self.assertEqual(db.session.get(Student, sid).total_credits, 4)

        GradeService.record_grade(sid, 'MA101', semester=1, grade=3.5)
        self.assertEqual(db.session.get(Student, sid).total_credits, 7)

        GradeService.remove_grade(sid, 'CS101')
        self.assertEqual(db.session.get(Student, sid).total_credits, 3)
        self.assertEqual(GradeService.calculate_total_credits(sid), 3)

        GradeService.remove_grade(sid, 'MA101')
        self.assertEqual(db.session.get(Student, sid).total_credits, 0)

    def test_update_grade_to_other_course(self):
        student = self.add_student()
        sid = student.student_id
        self.add_course('CS101', credits=4)
        self.add_course('MA101', credits=2)

        GradeService.record_grade(sid, 'CS101', semester=1, grade=3.0)
        GradeService.update_grade(sid, 'CS101', grade=3.9, new_course_code='MA101')

        self.assertIsNone(db.session.get(Grade, (sid, 'CS101')))
        moved = db.session.get(Grade, (sid, 'MA101'))
        self.assertEqual(float(moved.grade), 3.9)
        self.assertEqual(db.session.get(Student, sid).total_credits, 2)

    def test_grade_validation(self):
        student = self.add_student()
        self.add_course()
        with self.assertRaises(ValidationError):
            GradeService.record_grade(student.student_id, 'CS101', semester=1, grade=12)
        with self.assertRaises(ValidationError):
            GradeService.record_grade(student.student_id, 'CS101', semester=0, grade=3)

    def test_transcript(self):
        student = self.add_student()
        self.add_course()
        GradeService.record_grade(student.student_id, 'CS101', semester=1, grade=3.25)

        transcript = GradeService.get_transcript(student.student_id)
        self.assertEqual(transcript[0]['course_code'], 'CS101')
        self.assertEqual(transcript[0]['grade'], 3.25)

class TestAttendanceService(ServiceTestCase):

    def test_one_status_per_day(self):
        student = self.add_student()
        sid = student.student_id
        self.add_course()

        AttendanceService.mark_attendance(sid, 'CS101', 'Present', '2025-01-10')
        db.session.expunge_all()
        with self.assertRaises(DuplicateKeyError):
            AttendanceService.mark_attendance(sid, 'CS101', 'Absent', '2025-01-10')

        AttendanceService.mark_attendance(sid, 'CS101', AttendanceStatus.ABSENT, '2025-01-11')
        self.assertEqual(AttendanceService.get_attendance_percentage(sid, 'CS101'), 50.0)

    def test_invalid_status(self):
        student = self.add_student()
        self.add_course()
        with self.assertRaises(ValidationError):
            AttendanceService.mark_attendance(student.student_id, 'CS101', 'Late')

    def test_mark_course_attendance(self):
        first = self.add_student()
        second = self.add_student(first_name='Grace', email='grace@example.edu')
        self.add_course()

        count = AttendanceService.mark_course_attendance('CS101', '2025-01-10', {
            first.student_id: 'Present',
            second.student_id: 'Absent',
        })

        self.assertEqual(count, 2)
        self.assertEqual(Attendance.query.filter_by(course_code='CS101').count(), 2)

class TestFeeService(ServiceTestCase):

    def test_pending_past_due_becomes_overdue_on_update(self):
        """Setting a past-due fee to Pending stores Overdue"""
        student = self.add_student()
        fee = FeeService.add_fee(student.student_id, 500, date.today() - timedelta(days=1), FeeStatus.PAID)

        FeeService.set_status(fee.fee_id, 'Pending')
        db.session.expire_all()

        self.assertEqual(db.session.get(Fee, fee.fee_id).status, FeeStatus.OVERDUE)

    def test_insert_does_not_escalate(self):
        student = self.add_student()
        fee = FeeService.add_fee(student.student_id, 500, date.today() - timedelta(days=30))

        self.assertEqual(db.session.get(Fee, fee.fee_id).status, FeeStatus.PENDING)
        self.assertEqual(FeeService.get_past_due_pending(), [fee])

        # rewriting the same status still runs the rule
        FeeService.set_status(fee.fee_id, FeeStatus.PENDING)
        db.session.expire_all()
        self.assertEqual(db.session.get(Fee, fee.fee_id).status, FeeStatus.OVERDUE)
        self.assertEqual(FeeService.get_past_due_pending(), [])

    def test_future_and_paid_fees_untouched(self):
        student = self.add_student()
        future = FeeService.add_fee(student.student_id, 100, date.today() + timedelta(days=10))
        paid = FeeService.add_fee(student.student_id, 100, date.today() - timedelta(days=10), 'Paid')

        FeeService.update_fee(future.fee_id, amount=120)
        FeeService.update_fee(paid.fee_id, amount=90)
        db.session.expire_all()

        self.assertEqual(db.session.get(Fee, future.fee_id).status, FeeStatus.PENDING)
        self.assertEqual(db.session.get(Fee, paid.fee_id).status, FeeStatus.PAID)

    def test_moving_due_date_into_past_escalates(self):
        student = self.add_student()
        fee = FeeService.add_fee(student.student_id, 100, date.today() + timedelta(days=10))

        FeeService.update_fee(fee.fee_id, due_date=date.today() - timedelta(days=2))
        db.session.expire_all()

        self.assertEqual(db.session.get(Fee, fee.fee_id).status, FeeStatus.OVERDUE)

    def test_outstanding_balance(self):
        student = self.add_student()
        FeeService.add_fee(student.student_id, 100, date.today() + timedelta(days=10))
        paid = FeeService.add_fee(student.student_id, 50, date.today() + timedelta(days=10))
        FeeService.mark_paid(paid.fee_id)

        self.assertEqual(float(FeeService.get_outstanding_balance(student.student_id)), 100.0)
        self.assertEqual(len(FeeService.get_student_fees(student.student_id, 'Paid')), 1)

    def test_update_fee_rejects_unknown_fields(self):
        student = self.add_student()
        fee = FeeService.add_fee(student.student_id, 100)
        with self.assertRaises(ValidationError):
            FeeService.update_fee(fee.fee_id, student_id=2)

    def test_fee_for_unknown_student(self):
        with self.assertRaises(ForeignKeyViolation):
            FeeService.add_fee(404, 100)

class TestLibraryService(ServiceTestCase):

    def test_double_issue_rejected_until_returned(self):
        """A student cannot hold two unreturned issues of the same book"""
        student = self.add_student()
        book = LibraryService.add_book({'title': 'Dune', 'available_copies': 3})

        first = LibraryService.issue_book(student.student_id, book.book_id, date(2025, 1, 1))
        with self.assertRaises(BookAlreadyIssuedError) as context:
            LibraryService.issue_book(student.student_id, book.book_id)
        self.assertEqual(str(context.exception), 'Book is already issued to this student.')

        LibraryService.return_book(first.issue_id, date(2025, 1, 20))
        second = LibraryService.issue_book(student.student_id, book.book_id, date(2025, 2, 1))

        self.assertNotEqual(first.issue_id, second.issue_id)
        self.assertEqual(len(LibraryService.open_issues(student.student_id)), 1)

    def test_other_student_can_borrow_same_book(self):
        first = self.add_student()
        second = self.add_student(first_name='Grace', email='grace@example.edu')
        book = LibraryService.add_book({'title': 'Dune', 'available_copies': 2})

        LibraryService.issue_book(first.student_id, book.book_id)
        LibraryService.issue_book(second.student_id, book.book_id)

        self.assertEqual(db.session.get(Book, book.book_id).available_copies, 0)

    def test_available_copies(self):
        first = self.add_student()
        second = self.add_student(first_name='Grace', email='grace@example.edu')
        book = LibraryService.add_book({'title': 'Dune', 'available_copies': 1})

        issue = LibraryService.issue_book(first.student_id, book.book_id)
        with self.assertRaises(NoCopiesAvailableError):
            LibraryService.issue_book(second.student_id, book.book_id)

        LibraryService.return_book(issue.issue_id)
        self.assertEqual(db.session.get(Book, book.book_id).available_copies, 1)

    def test_return_twice(self):
        student = self.add_student()
        book = LibraryService.add_book({'title': 'Dune'})
        issue = LibraryService.issue_book(student.student_id, book.book_id)
        LibraryService.return_book(issue.issue_id)

        with self.assertRaises(ValidationError):
            LibraryService.return_book(issue.issue_id)

    def test_issue_unknown_book_or_student(self):
        student = self.add_student()
        book = LibraryService.add_book({'title': 'Dune'})

        with self.assertRaises(RecordNotFoundError):
            LibraryService.issue_book(student.student_id, 999)
        with self.assertRaises(ForeignKeyViolation):
            LibraryService.issue_book(999, book.book_id)
        self.assertEqual(db.session.get(Book, book.book_id).available_copies, 1)

class TestAccountService(ServiceTestCase):

    def test_create_student_account(self):
        student = self.add_student()
        account = AccountService.create_account('ada', 'secret123', 'Student', student_id=student.student_id)

        self.assertEqual(account.role, UserRole.STUDENT)
        self.assertTrue(account.check_password('secret123'))
        self.assertEqual(student.account, account)

    def test_account_links_follow_role(self):
        student = self.add_student()
        professor = self.add_professor()

        with self.assertRaises(ValidationError):
            AccountService.create_account('ada', 'secret123', UserRole.STUDENT)
        with self.assertRaises(ValidationError):
            AccountService.create_account('ada', 'secret123', UserRole.STUDENT,
                                          student_id=student.student_id, professor_id=professor.professor_id)
        with self.assertRaises(ValidationError):
            AccountService.create_account('boss', 'secret123', UserRole.ADMIN, student_id=student.student_id)
        with self.assertRaises(ValidationError):
            AccountService.create_account('ada', 'secret123', 'Janitor')

    def test_one_account_per_student(self):
        student = self.add_student()
        AccountService.create_account('ada', 'secret123', UserRole.STUDENT, student_id=student.student_id)
        with self.assertRaises(DuplicateKeyError):
            AccountService.create_account('ada2', 'secret123', UserRole.STUDENT, student_id=student.student_id)
        with self.assertRaises(DuplicateKeyError):
            AccountService.create_account('ada', 'secret123', UserRole.ADMIN)

    def test_change_password(self):
        account = AccountService.create_account('registrar', 'secret123', UserRole.ADMIN)

        with self.assertRaises(ValidationError):
            AccountService.change_password(account.user_id, 'wrong', 'newsecret1')
        AccountService.change_password(account.user_id, 'secret123', 'newsecret1')
        self.assertTrue(db.session.get(UserAccount, account.user_id).check_password('newsecret1'))

    def test_notifications(self):
        account = AccountService.create_account('registrar', 'secret123', UserRole.ADMIN)
        notification = AccountService.send_notification(account.user_id, 'Fees are due')

        self.assertEqual(len(AccountService.unread_notifications(account.user_id)), 1)
        AccountService.mark_read(notification.notification_id)
        self.assertEqual(AccountService.unread_notifications(account.user_id), [])

        with self.assertRaises(ForeignKeyViolation):
            AccountService.send_notification(999, 'Nobody home')

    def test_broadcast(self):
        AccountService.create_account('registrar', 'secret123', UserRole.ADMIN)
        sent = AccountService.broadcast('Admin', 'Maintenance tonight')

        # the default admin account plus the one above
        self.assertEqual(sent, 2)
        self.assertEqual(Notification.query.count(), 2)

class TestFeedbackService(ServiceTestCase):

    def test_submit_feedback(self):
        student = self.add_student()
        self.add_course()

        FeedbackService.submit_feedback(student.student_id, 'CS101', rating=4, comments='Good')
        FeedbackService.submit_feedback(student.student_id, 'CS101', rating='5')

        self.assertEqual(len(FeedbackService.get_course_feedback('CS101')), 2)
        self.assertEqual(FeedbackService.get_course_rating('CS101'), 4.5)

    def test_rating_outside_range(self):
        student = self.add_student()
        self.add_course()

        with self.assertRaises(CheckViolation):
            FeedbackService.submit_feedback(student.student_id, 'CS101', rating=6)
        with self.assertRaises(ValidationError):
            FeedbackService.submit_feedback(student.student_id, 'CS101', rating='great')

    def test_feedback_survives_course_deletion(self):
        student = self.add_student()
        course = self.add_course()
        feedback = FeedbackService.submit_feedback(student.student_id, 'CS101', rating=3)
        feedback_id = feedback.feedback_id

        db.session.delete(course)
        db.session.commit()

        stored = db.session.get(Feedback, feedback_id)
        self.assertIsNotNone(stored)
        self.assertIsNone(stored.course_code)

if __name__ == '__main__':
    unittest.main()
