"""
Account service for the Student Management System
User accounts and notifications
"""

from flask import current_app
from database import handle_db_error, ValidationError
from models.account import UserAccount, UserRole, Notification
from utils.db_helpers import add_and_commit, commit_or_raise, get_or_raise
from utils.validators import coerce_enum, ensure_valid, validate_password, validate_username

class AccountService:
    """Account service class"""
    
    @staticmethod
    def check_account_links(role, student_id=None, professor_id=None):
        """Check that an account links to the person its role requires.
        
        Student accounts link a student only, Professor accounts a professor
        only, and Admin accounts neither.
        """
        if role == UserRole.STUDENT and (student_id is None or professor_id is not None):
            return False, "Student accounts must link a student and no professor"
        if role == UserRole.PROFESSOR and (professor_id is None or student_id is not None):
            return False, "Professor accounts must link a professor and no student"
        if role == UserRole.ADMIN and (student_id is not None or professor_id is not None):
            return False, "Admin accounts cannot link a student or professor"
        return True, "Valid account links"
    
    @staticmethod
    @handle_db_error
    def create_account(username, password, role, student_id=None, professor_id=None):
        """Create a user account with a hashed password"""
        role = coerce_enum(UserRole, role, 'Role')
        if role is None:
            raise ValidationError("Role is required")
        
        ensure_valid(
            validate_username(username),
            validate_password(password),
            AccountService.check_account_links(role, student_id, professor_id),
        )
        
        account = UserAccount(
            username=username.strip(),
            role=role,
            student_id=student_id,
            professor_id=professor_id
        )
        account.set_password(password)
        add_and_commit(account)
        current_app.logger.info("Account %s created for role %s", account.username, role.value)
        return account
    
    @staticmethod
    @handle_db_error
    def change_password(user_id, current_password, new_password):
        """Replace the stored credential after checking the current one"""
        account = get_or_raise(UserAccount, user_id, 'User account')
        if not account.check_password(current_password):
            raise ValidationError("Current password is incorrect")
        
        ensure_valid(validate_password(new_password))
        account.set_password(new_password)
        commit_or_raise()
        return account
    
    @staticmethod
    @handle_db_error
    def send_notification(user_id, message):
        """Deliver a message to an account"""
        if not message or not message.strip():
            raise ValidationError("Message is required")
        
        notification = Notification(user_id=user_id, message=message.strip())
        return add_and_commit(notification)
    
    @staticmethod
    @handle_db_error
    def broadcast(role, message):
        """Send the same message to every account with a role"""
        role = coerce_enum(UserRole, role, 'Role')
        if role is None or not message or not message.strip():
            raise ValidationError("Role and message are required")
        
        accounts = UserAccount.query.filter(UserAccount.role == role).all()
        
        for account in accounts:
            account.notifications.append(Notification(message=message))
        commit_or_raise()
        current_app.logger.info("Broadcast to %d %s accounts", len(accounts), role.value)
        return len(accounts)
    
    @staticmethod
    @handle_db_error
    def mark_read(notification_id):
        notification = get_or_raise(Notification, notification_id, 'Notification')
        notification.mark_read()
        commit_or_raise()
        return notification
    
    @staticmethod
    def unread_notifications(user_id):
        """Unread notifications for an account, newest first"""
        account = get_or_raise(UserAccount, user_id, 'User account')
        return account.get_unread_notifications()
