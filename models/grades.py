"""
Grade model for the Student Management System
One row per student per course; its presence is the enrollment record
"""

from database import db

class Grade(db.Model):
    """Grade earned by a student in a course"""
    __tablename__ = 'grades'
    
    semester = db.Column(db.Integer, nullable=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           primary_key=True)
    course_code = db.Column(db.String(10), db.ForeignKey('courses.course_code', ondelete='CASCADE'),
                            primary_key=True)
    grade = db.Column(db.Numeric(3, 2), nullable=True)
    
    @staticmethod
    def get_student_grades(student_id):
        """Get all grade rows for a student"""
        return Grade.query.filter_by(student_id=student_id).order_by(Grade.course_code).all()
    
    @staticmethod
    def get_course_grades(course_code):
        """Get all grade rows for a course"""
        return Grade.query.filter_by(course_code=course_code).order_by(Grade.student_id).all()
    
    def to_dict(self):
        """Convert grade to dictionary"""
        return {
            'student_id': self.student_id,
            'course_code': self.course_code,
            'course_name': self.course.course_name if self.course else None,
            'semester': self.semester,
            'grade': float(self.grade) if self.grade is not None else None
        }
    
    def __repr__(self):
        return f'<Grade {self.student_id} - {self.course_code}: {self.grade}>'
