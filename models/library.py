"""
Library models for the Student Management System
Book (library table) and BookIssue models
"""

from database import db

class Book(db.Model):
    """Library catalogue entry"""
    __tablename__ = 'library'
    
    book_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(100), nullable=False)
    author = db.Column(db.String(100), nullable=True)
    isbn = db.Column(db.String(20), unique=True, nullable=True)
    available_copies = db.Column(db.Integer, nullable=False)
    
    issues = db.relationship('BookIssue', backref='book', lazy='dynamic',
                             cascade='all, delete-orphan', passive_deletes=True)
    
    def get_open_issues(self):
        """Get issues of this book that are still out"""
        return self.issues.filter_by(return_date=None).all()
    
    def to_dict(self):
        return {
            'book_id': self.book_id,
            'title': self.title,
            'author': self.author,
            'isbn': self.isbn,
            'available_copies': self.available_copies
        }
    
    def __repr__(self):
        return f'<Book {self.book_id}: {self.title}>'

class BookIssue(db.Model):
    """A book lent to a student; open while return_date is empty"""
    __tablename__ = 'book_issue'
    
    issue_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           nullable=False, index=True)
    book_id = db.Column(db.Integer, db.ForeignKey('library.book_id', ondelete='CASCADE'),
                        nullable=False, index=True)
    issue_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date, nullable=True)
    
    @property
    def is_open(self):
        return self.return_date is None
    
    @staticmethod
    def find_open_issue(student_id, book_id):
        """Get the unreturned issue of a book to a student, if any"""
        return BookIssue.query.filter_by(
            student_id=student_id,
            book_id=book_id,
            return_date=None
        ).first()
    
    def to_dict(self):
        return {
            'issue_id': self.issue_id,
            'student_id': self.student_id,
            'book_id': self.book_id,
            'title': self.book.title if self.book else None,
            'issue_date': self.issue_date.isoformat() if self.issue_date else None,
            'return_date': self.return_date.isoformat() if self.return_date else None
        }
    
    def __repr__(self):
        return f'<BookIssue {self.issue_id}: book {self.book_id} -> student {self.student_id}>'
