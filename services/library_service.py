"""
Library service for the Student Management System
Catalogue and circulation
"""

from datetime import date
from flask import current_app
from database import (
    db, handle_db_error, BookAlreadyIssuedError, NoCopiesAvailableError,
    RecordNotFoundError, ValidationError
)
from models.library import Book, BookIssue
from utils.db_helpers import add_and_commit, commit_or_raise, get_or_raise
from utils.validators import ensure_valid, parse_date, validate_title

class LibraryService:
    """Library service class"""
    
    @staticmethod
    @handle_db_error
    def add_book(book_data):
        """Add a title to the catalogue"""
        ensure_valid(validate_title(book_data.get('title'), 'Title'))
        copies = book_data.get('available_copies', 1)
        if copies is None or int(copies) < 0:
            raise ValidationError("Available copies cannot be negative")
        
        book = Book(
            title=book_data['title'].strip(),
            author=book_data.get('author'),
            isbn=book_data.get('isbn'),
            available_copies=int(copies)
        )
        return add_and_commit(book)
    
    @staticmethod
    @handle_db_error
    def issue_book(student_id, book_id, issue_date=None):
        """Lend a book to a student.
        
        The book row is locked for the check-then-insert, so two concurrent
        requests cannot both pass the open-issue check.
        """
        book = (
            Book.query
            .filter_by(book_id=book_id)
            .with_for_update()
            .first()
        )
        if book is None:
            raise RecordNotFoundError(f"Book {book_id} not found")
        
        if BookIssue.find_open_issue(student_id, book_id) is not None:
            db.session.rollback()
            current_app.logger.warning("Rejected second issue of book %s to student %s", book_id, student_id)
            raise BookAlreadyIssuedError()
        
        if book.available_copies <= 0:
            db.session.rollback()
            raise NoCopiesAvailableError(f"No copies of '{book.title}' are available")
        
        issue = BookIssue(
            student_id=student_id,
            book_id=book_id,
            issue_date=parse_date(issue_date, 'Issue date') or date.today()
        )
        book.available_copies -= 1
        add_and_commit(issue)
        current_app.logger.info("Book %s issued to student %s (issue %s)", book_id, student_id, issue.issue_id)
        return issue
    
    @staticmethod
    @handle_db_error
    def return_book(issue_id, return_date=None):
        """Close an issue; the student may borrow the same title again afterwards"""
        issue = get_or_raise(BookIssue, issue_id, 'Book issue')
        if issue.return_date is not None:
            raise ValidationError(f"Book issue {issue_id} was already returned on {issue.return_date}")
        
        returned_on = parse_date(return_date, 'Return date') or date.today()
        if returned_on < issue.issue_date:
            raise ValidationError("Return date cannot be before the issue date")
        
        issue.return_date = returned_on
        issue.book.available_copies += 1
        commit_or_raise()
        current_app.logger.info("Book issue %s returned on %s", issue_id, returned_on)
        return issue
    
    @staticmethod
    def open_issues(student_id=None):
        """Unreturned issues, optionally for one student"""
        query = BookIssue.query.filter(BookIssue.return_date.is_(None))
        if student_id is not None:
            query = query.filter_by(student_id=student_id)
        return query.order_by(BookIssue.issue_date).all()
