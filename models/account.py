"""
Account models for the Student Management System
UserAccount and Notification models
"""

import enum
from datetime import datetime
from database import db
from werkzeug.security import generate_password_hash, check_password_hash

class UserRole(str, enum.Enum):
    STUDENT = 'Student'
    PROFESSOR = 'Professor'
    ADMIN = 'Admin'

class UserAccount(db.Model):
    """Login account linked to at most one student or professor"""
    __tablename__ = 'user_accounts'
    
    user_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(UserRole, name='user_role',
                values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=False
    )
    # Nulled rather than deleted when the linked person is removed
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='SET NULL'),
                           unique=True, nullable=True)
    professor_id = db.Column(db.Integer, db.ForeignKey('professors.professor_id', ondelete='SET NULL'),
                             unique=True, nullable=True)
    
    student = db.relationship('Student', backref=db.backref('account', uselist=False, passive_deletes=True))
    professor = db.relationship('Professor', backref=db.backref('account', uselist=False, passive_deletes=True))
    notifications = db.relationship('Notification', backref='user', lazy='dynamic',
                                    cascade='all, delete-orphan', passive_deletes=True)
    
    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)
    
    def check_password(self, password):
        """Check password against hash"""
        return check_password_hash(self.password_hash, password)
    
    def get_unread_notifications(self):
        return self.notifications.filter_by(is_read=False).order_by(Notification.date_sent.desc()).all()
    
    def to_dict(self):
        """Convert account to dictionary"""
        return {
            'user_id': self.user_id,
            'username': self.username,
            'role': UserRole(self.role).value if self.role else None,
            'student_id': self.student_id,
            'professor_id': self.professor_id
        }
    
    def __repr__(self):
        return f'<UserAccount {self.username}>'

class Notification(db.Model):
    """Message delivered to a user account"""
    __tablename__ = 'notifications'
    
    notification_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user_accounts.user_id', ondelete='CASCADE'),
                        nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    date_sent = db.Column(db.DateTime, default=datetime.utcnow, server_default=db.func.current_timestamp())
    is_read = db.Column(db.Boolean, default=False, server_default=db.false())
    
    def mark_read(self):
        self.is_read = True
    
    def to_dict(self):
        return {
            'notification_id': self.notification_id,
            'user_id': self.user_id,
            'message': self.message,
            'date_sent': self.date_sent.isoformat() if self.date_sent else None,
            'is_read': self.is_read
        }
    
    def __repr__(self):
        return f'<Notification {self.notification_id} -> {self.user_id}>'
