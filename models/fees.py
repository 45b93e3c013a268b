"""
Fee model for the Student Management System
"""

import enum
from datetime import date
from flask import current_app
from sqlalchemy import event
from database import db

class FeeStatus(str, enum.Enum):
    PAID = 'Paid'
    PENDING = 'Pending'
    OVERDUE = 'Overdue'

class Fee(db.Model):
    """Fee charged to a student"""
    __tablename__ = 'fees'
    
    fee_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.student_id', ondelete='CASCADE'),
                           nullable=False, index=True)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    due_date = db.Column(db.Date, nullable=True)
    status = db.Column(
        db.Enum(FeeStatus, name='fee_status',
                values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=False
    )
    
    def is_past_due(self, today=None):
        """Check if the due date has passed"""
        today = today or date.today()
        return self.due_date is not None and self.due_date < today
    
    def escalate_if_overdue(self, today=None):
        """Store a past-due Pending fee as Overdue; Paid and Overdue rows are left alone.
        
        Returns True when the status was changed.
        """
        if self.status == FeeStatus.PENDING and self.is_past_due(today):
            self.status = FeeStatus.OVERDUE
            return True
        return False
    
    def to_dict(self):
        """Convert fee to dictionary"""
        return {
            'fee_id': self.fee_id,
            'student_id': self.student_id,
            'amount': float(self.amount) if self.amount is not None else None,
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'status': FeeStatus(self.status).value if self.status else None
        }
    
    def __repr__(self):
        return f'<Fee {self.fee_id}: {self.amount} ({self.status})>'

@event.listens_for(Fee, 'before_update')
def escalate_overdue_fee(mapper, connection, target):
    """Apply the overdue rule to every UPDATE of a fee row (never on INSERT)"""
    if target.escalate_if_overdue():
        current_app.logger.info("Fee %s is past due %s; status set to Overdue",
                                target.fee_id, target.due_date)
