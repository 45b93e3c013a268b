"""
Database configuration and initialization for the Student Management System
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import sqlite3

# Initialize SQLAlchemy instance
db = SQLAlchemy()

@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints for SQLite"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def init_db(app):
    """Create all tables and the default admin account"""
    with app.app_context():
        # Import all models to ensure they are registered
        import models  # noqa: F401
        
        db.create_all()
        create_default_admin_account()
        app.logger.info("Database initialized")

def create_default_admin_account():
    """Create the default admin account for initial access"""
    from models.account import UserAccount, UserRole
    
    username = current_app.config['DEFAULT_ADMIN_USERNAME']
    existing = UserAccount.query.filter_by(username=username).first()
    
    if not existing:
        admin = UserAccount(username=username, role=UserRole.ADMIN)
        admin.set_password(current_app.config['DEFAULT_ADMIN_PASSWORD'])
        
        try:
            db.session.add(admin)
            db.session.commit()
            current_app.logger.info("Default admin account created: %s", username)
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Error creating default admin account")
            raise

def reset_database(app):
    """Reset database - WARNING: This will delete all data"""
    with app.app_context():
        import models  # noqa: F401
        
        db.drop_all()
        db.create_all()
        create_default_admin_account()
        app.logger.warning("Database reset completed")

class DatabaseError(Exception):
    """Base exception for database operations"""
    pass

class IntegrityViolation(DatabaseError):
    """A write was rejected by a table constraint"""
    pass

class DuplicateKeyError(IntegrityViolation):
    """Primary key or unique constraint violation"""
    pass

class ForeignKeyViolation(IntegrityViolation):
    """Referenced row does not exist"""
    pass

class CheckViolation(IntegrityViolation):
    """Check, not-null or enumeration constraint violation"""
    pass

class BookAlreadyIssuedError(DatabaseError):
    """The student already holds an unreturned issue of this book"""
    
    def __init__(self, message="Book is already issued to this student."):
        super().__init__(message)

class NoCopiesAvailableError(DatabaseError):
    """Every copy of the book is out"""
    pass

class RecordNotFoundError(DatabaseError):
    """Lookup by primary key found nothing"""
    pass

class ValidationError(DatabaseError):
    """Input failed validation before reaching the database"""
    pass

def handle_db_error(func):
    """Decorator that rolls back the session and wraps unexpected errors"""
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError:
            db.session.rollback()
            raise
        except Exception as e:
            db.session.rollback()
            raise DatabaseError(f"Database operation failed: {str(e)}") from e
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper
