"""
Student models for the Student Management System
Student, Address and EmergencyContact models
"""

from database import db

class Student(db.Model):
    """Student model"""
    __tablename__ = 'students'

    student_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone = db.Column(db.String(15), nullable=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    enrollment_date = db.Column(db.Date, nullable=False)
    major = db.Column(db.String(100), nullable=False)
    # Maintained by GradeService.recompute_total_credits
    total_credits = db.Column(db.Integer, nullable=False, default=0)

    # Dependent rows are removed by the database (ON DELETE CASCADE)
    grades = db.relationship('Grade', backref='student', lazy='dynamic',
                             cascade='all, delete-orphan', passive_deletes=True)
    attendance_records = db.relationship('Attendance', backref='student', lazy='dynamic',
                                         cascade='all, delete-orphan', passive_deletes=True)
    address = db.relationship('Address', backref='student', uselist=False,
                              cascade='all, delete-orphan', passive_deletes=True)
    emergency_contacts = db.relationship('EmergencyContact', backref='student', lazy='dynamic',
                                         cascade='all, delete-orphan', passive_deletes=True)
    fees = db.relationship('Fee', backref='student', lazy='dynamic',
                           cascade='all, delete-orphan', passive_deletes=True)
    book_issues = db.relationship('BookIssue', backref='student', lazy='dynamic',
                                  cascade='all, delete-orphan', passive_deletes=True)
    feedback = db.relationship('Feedback', backref='student', lazy='dynamic',
                               cascade='all, delete-orphan', passive_deletes=True)

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def get_enrolled_courses(self):
        """Get all courses the student has a grade row for"""
        return [grade.course for grade in self.grades]

    def get_open_book_issues(self):
        """Get issues that have not been returned yet"""
        return self.book_issues.filter_by(return_date=None).all()

    def to_dict(self):
        """Convert student to dictionary"""
        return {
            'student_id': self.student_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'date_of_birth': self.date_of_birth.isoformat() if self.date_of_birth else None,
            'enrollment_date': self.enrollment_date.isoformat() if self.enrollment_date else None,
            'major': self.major,
            'total_credits': self.total_credits
        }

    def __repr__(self):
        return f'<Student {self.student_id}: {self.first_name} {self.last_name}>'

class Address(db.Model):
    """Postal address, one per student"""
    __tablename__ = 'address'

    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           primary_key=True)
    street = db.Column(db.String(100), nullable=True)
    city = db.Column(db.String(50), nullable=True)
    state = db.Column(db.String(50), nullable=True)
    pin_code = db.Column(db.String(10), nullable=True)
    country = db.Column(db.String(50), nullable=True)

    def to_dict(self):
        return {
            'student_id': self.student_id,
            'street': self.street,
            'city': self.city,
            'state': self.state,
            'pin_code': self.pin_code,
            'country': self.country
        }

    def __repr__(self):
        return f'<Address {self.student_id}: {self.city}>'

class EmergencyContact(db.Model):
    """Emergency contact for a student"""
    __tablename__ = 'emergency_contacts'

    contact_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           nullable=False, index=True)
    contact_name = db.Column(db.String(100), nullable=False)
    relationship = db.Column(db.String(50), nullable=False)
    phone = db.Column(db.String(15), nullable=False)
    email = db.Column(db.String(100), nullable=True)

    def to_dict(self):
        return {
            'contact_id': self.contact_id,
            'student_id': self.student_id,
            'contact_name': self.contact_name,
            'relationship': self.relationship,
            'phone': self.phone,
            'email': self.email
        }

    def __repr__(self):
        return f'<EmergencyContact {self.contact_name} ({self.relationship})>'
