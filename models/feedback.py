"""
Feedback model for the Student Management System
"""

from database import db

class Feedback(db.Model):
    """Course feedback left by a student"""
    __tablename__ = 'feedback'
    
    feedback_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    course_code = db.Column(db.String(10), db.ForeignKey('courses.course_code', ondelete='SET NULL'),
                            nullable=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           nullable=False, index=True)
    rating = db.Column(db.Integer, nullable=True)
    comments = db.Column(db.Text, nullable=True)
    
    __table_args__ = (db.CheckConstraint('rating >= 1 AND rating <= 5', name='rating_range'),)
    
    @staticmethod
    def get_course_average(course_code):
        """Average rating for a course, 0.0 when unrated"""
        average = db.session.query(db.func.avg(Feedback.rating)).filter(
            Feedback.course_code == course_code
        ).scalar()
        return round(float(average), 2) if average is not None else 0.0
    
    def to_dict(self):
        return {
            'feedback_id': self.feedback_id,
            'course_code': self.course_code,
            'student_id': self.student_id,
            'rating': self.rating,
            'comments': self.comments
        }
    
    def __repr__(self):
        return f'<Feedback {self.feedback_id}: {self.course_code} rated {self.rating}>'
