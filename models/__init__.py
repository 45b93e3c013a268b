"""
Database models package for the Student Management System
"""

from .student import Student, Address, EmergencyContact
from .academic import Department, Professor, TeachingAssistant, Course, SemesterOffered
from .grades import Grade
from .attendance import Attendance, AttendanceStatus
from .fees import Fee, FeeStatus
from .library import Book, BookIssue
from .account import UserAccount, UserRole, Notification
from .feedback import Feedback

__all__ = [
    'Student', 'Address', 'EmergencyContact',
    'Department', 'Professor', 'TeachingAssistant', 'Course', 'SemesterOffered',
    'Grade', 'Attendance', 'AttendanceStatus', 'Fee', 'FeeStatus',
    'Book', 'BookIssue', 'UserAccount', 'UserRole', 'Notification', 'Feedback'
]
