"""
Feedback service for the Student Management System
"""

from database import handle_db_error, ValidationError
from models.feedback import Feedback
from utils.db_helpers import add_and_commit

class FeedbackService:
    """Feedback service class"""
    
    @staticmethod
    @handle_db_error
    def submit_feedback(student_id, course_code, rating=None, comments=None):
        """Store a student's feedback on a course.
        
        The 1-5 rating range is enforced by the table; a rating outside it
        raises CheckViolation.
        """
        if rating is not None:
            try:
                rating = int(rating)
            except (TypeError, ValueError):
                raise ValidationError("Rating must be a whole number")
        
        feedback = Feedback(
            student_id=student_id,
            course_code=course_code,
            rating=rating,
            comments=comments
        )
        return add_and_commit(feedback)
    
    @staticmethod
    def get_course_feedback(course_code):
        return Feedback.query.filter_by(course_code=course_code).order_by(Feedback.feedback_id).all()
    
    @staticmethod
    def get_course_rating(course_code):
        return Feedback.get_course_average(course_code)
