"""
Academic structure models for the Student Management System
Department, Professor, TeachingAssistant and Course models
"""

import enum
from database import db

class SemesterOffered(str, enum.Enum):
    """Semesters in which a course runs"""
    ODD = 'Odd'
    EVEN = 'Even'
    BOTH = 'Both'

class Department(db.Model):
    """Academic department"""
    __tablename__ = 'departments'

    department_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    department_name = db.Column(db.String(100), unique=True, nullable=False)
    # professors and departments reference each other; this side is created last
    department_head = db.Column(
        db.Integer,
        db.ForeignKey('professors.professor_id', ondelete='SET NULL',
                      use_alter=True, name='fk_departments_department_head'),
        nullable=True
    )

    head = db.relationship('Professor', foreign_keys=[department_head], post_update=True,
                           backref=db.backref('headed_department', uselist=False,
                                         passive_deletes=True, post_update=True))

    def to_dict(self):
        """Convert department to dictionary"""
        return {
            'department_id': self.department_id,
            'department_name': self.department_name,
            'department_head': self.department_head,
            'head_name': self.head.full_name if self.head else None
        }

    def __repr__(self):
        return f'<Department {self.department_id}: {self.department_name}>'

class Professor(db.Model):
    """Professor model"""
    __tablename__ = 'professors'

    professor_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone = db.Column(db.String(15), nullable=True)
    department = db.Column(db.String(100), nullable=True)
    department_id = db.Column(db.Integer, db.ForeignKey('departments.department_id', ondelete='SET NULL'),
                              nullable=True)

    academic_department = db.relationship(
        'Department', foreign_keys=[department_id],
        backref=db.backref('professors', lazy='dynamic', passive_deletes=True)
    )
    teaching_assistants = db.relationship('TeachingAssistant', backref='professor', lazy='dynamic',
                                          passive_deletes=True)
    courses = db.relationship('Course', backref='professor', lazy='dynamic', passive_deletes=True)

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def to_dict(self):
        """Convert professor to dictionary"""
        return {
            'professor_id': self.professor_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'department': self.department,
            'department_id': self.department_id,
            'courses': [course.course_code for course in self.courses]
        }

    def __repr__(self):
        return f'<Professor {self.professor_id}: {self.full_name}>'

class TeachingAssistant(db.Model):
    """Teaching assistant attached to a professor"""
    __tablename__ = 'teaching_assistants'

    ta_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone = db.Column(db.String(15), nullable=True)
    associated_professor_id = db.Column(db.Integer,
                                        db.ForeignKey('professors.professor_id', ondelete='SET NULL'),
                                        nullable=True)

    def to_dict(self):
        return {
            'ta_id': self.ta_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'associated_professor_id': self.associated_professor_id
        }

    def __repr__(self):
        return f'<TeachingAssistant {self.ta_id}: {self.first_name} {self.last_name}>'

class Course(db.Model):
    """Course model"""
    __tablename__ = 'courses'

    course_code = db.Column(db.String(10), primary_key=True)
    course_name = db.Column(db.String(100), nullable=False)
    credits = db.Column(db.Integer, nullable=False)
    department = db.Column(db.String(100), nullable=True)
    semester_offered = db.Column(
        db.Enum(SemesterOffered, name='semester_offered',
                values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=True
    )
    department_id = db.Column(db.Integer, db.ForeignKey('departments.department_id', ondelete='SET NULL'),
                              nullable=True)
    professor_id = db.Column(db.Integer, db.ForeignKey('professors.professor_id', ondelete='SET NULL'),
                             nullable=True)

    __table_args__ = (db.CheckConstraint('credits > 0', name='min_credits'),)

    academic_department = db.relationship(
        'Department', foreign_keys=[department_id],
        backref=db.backref('courses', lazy='dynamic', passive_deletes=True)
    )
    grades = db.relationship('Grade', backref='course', lazy='dynamic',
                             cascade='all, delete-orphan', passive_deletes=True)
    attendance_records = db.relationship('Attendance', backref='course', lazy='dynamic',
                                         cascade='all, delete-orphan', passive_deletes=True)
    # course_code is nulled on feedback rows when the course goes away
    feedback = db.relationship('Feedback', backref='course', lazy='dynamic', passive_deletes=True)

    def get_enrolled_students(self):
        """Get all students with a grade row for this course"""
        return [grade.student for grade in self.grades]

    def get_enrolled_students_count(self):
        return self.grades.count()

    def to_dict(self):
        """Convert course to dictionary"""
        return {
            'course_code': self.course_code,
            'course_name': self.course_name,
            'credits': self.credits,
            'department': self.department,
            'semester_offered': self.semester_offered.value if self.semester_offered else None,
            'department_id': self.department_id,
            'professor_id': self.professor_id,
            'professor_name': self.professor.full_name if self.professor else None,
            'enrolled_students': self.get_enrolled_students_count()
        }

    def __repr__(self):
        return f'<Course {self.course_code}: {self.course_name}>'
