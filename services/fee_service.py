"""
Fee service for the Student Management System
"""

from datetime import date
from decimal import Decimal
from flask import current_app
from database import handle_db_error, ValidationError
from models.fees import Fee, FeeStatus
from utils.db_helpers import add_and_commit, commit_or_raise, get_or_raise
from utils.validators import coerce_enum, ensure_valid, parse_date, validate_amount

class FeeService:
    """Fee service class"""
    
    UPDATABLE_FIELDS = ('amount', 'due_date', 'status')
    
    @staticmethod
    @handle_db_error
    def add_fee(student_id, amount, due_date=None, status=FeeStatus.PENDING):
        """Charge a fee to a student.
        
        Inserts are stored as given; the overdue rule only runs on updates.
        """
        ensure_valid(validate_amount(amount))
        fee = Fee(
            student_id=student_id,
            amount=Decimal(str(amount)),
            due_date=parse_date(due_date, 'Due date'),
            status=coerce_enum(FeeStatus, status, 'Fee status')
        )
        add_and_commit(fee)
        current_app.logger.info("Fee %s of %s charged to student %s", fee.fee_id, fee.amount, student_id)
        return fee
    
    @staticmethod
    @handle_db_error
    def update_fee(fee_id, **changes):
        """Update a fee row.
        
        A Pending fee whose due date has passed is stored as Overdue by the
        before-update rule on the Fee model.
        """
        fee = get_or_raise(Fee, fee_id, 'Fee')
        
        unknown = set(changes) - set(FeeService.UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update fee fields: {', '.join(sorted(unknown))}")
        
        if 'amount' in changes:
            ensure_valid(validate_amount(changes['amount']))
            fee.amount = Decimal(str(changes['amount']))
        if 'due_date' in changes:
            fee.due_date = parse_date(changes['due_date'], 'Due date')
        if 'status' in changes:
            fee.status = coerce_enum(FeeStatus, changes['status'], 'Fee status')
        
        commit_or_raise()
        return fee
    
    @staticmethod
    def set_status(fee_id, status):
        """Set the status of a fee (subject to the overdue rule)"""
        return FeeService.update_fee(fee_id, status=status)
    
    @staticmethod
    def mark_paid(fee_id):
        return FeeService.update_fee(fee_id, status=FeeStatus.PAID)
    
    @staticmethod
    def get_student_fees(student_id, status=None):
        """Get fees for a student, optionally filtered by status"""
        query = Fee.query.filter_by(student_id=student_id)
        if status is not None:
            query = query.filter(Fee.status == coerce_enum(FeeStatus, status, 'Fee status'))
        return query.order_by(Fee.due_date).all()
    
    @staticmethod
    def get_outstanding_balance(student_id):
        """Total of every fee that is not Paid"""
        fees = Fee.query.filter(Fee.student_id == student_id, Fee.status != FeeStatus.PAID).all()
        return sum((fee.amount for fee in fees), Decimal('0'))
    
    @staticmethod
    def get_past_due_pending(today=None):
        """Pending fees whose due date has passed but have not been written since.
        
        These still read as Pending; the next update of each row stores Overdue.
        """
        today = today or date.today()
        return Fee.query.filter(
            Fee.status == FeeStatus.PENDING,
            Fee.due_date.isnot(None),
            Fee.due_date < today
        ).all()
