"""
Attendance model for the Student Management System
"""

import enum
from database import db

class AttendanceStatus(str, enum.Enum):
    PRESENT = 'Present'
    ABSENT = 'Absent'

class Attendance(db.Model):
    """Daily attendance for a student in a course"""
    __tablename__ = 'attendance'
    
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           primary_key=True)
    course_code = db.Column(db.String(10), db.ForeignKey('courses.course_code', ondelete='CASCADE'),
                            primary_key=True)
    date = db.Column(db.Date, primary_key=True)
    status = db.Column(
        db.Enum(AttendanceStatus, name='attendance_status',
                values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=False
    )
    
    def is_present(self):
        """Check if student was present"""
        return self.status == AttendanceStatus.PRESENT
    
    def is_absent(self):
        """Check if student was absent"""
        return self.status == AttendanceStatus.ABSENT
    
    @staticmethod
    def get_attendance_percentage(student_id, course_code, start_date=None, end_date=None):
        """Calculate attendance percentage for a student in a course"""
        query = Attendance.query.filter_by(
            student_id=student_id,
            course_code=course_code
        )
        
        if start_date:
            query = query.filter(Attendance.date >= start_date)
        if end_date:
            query = query.filter(Attendance.date <= end_date)
        
        total_records = query.count()
        if total_records == 0:
            return 0
        
        present_records = query.filter(Attendance.status == AttendanceStatus.PRESENT).count()
        return round((present_records / total_records) * 100, 2)
    
    def to_dict(self):
        """Convert attendance record to dictionary"""
        return {
            'student_id': self.student_id,
            'course_code': self.course_code,
            'date': self.date.isoformat() if self.date else None,
            'status': AttendanceStatus(self.status).value if self.status else None
        }
    
    def __repr__(self):
        return f'<Attendance {self.student_id} - {self.course_code} - {self.date} - {self.status}>'
