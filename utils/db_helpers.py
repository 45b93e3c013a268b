"""
Database helper utilities for the Student Management System
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError
from database import (
    db, DatabaseError, IntegrityViolation, DuplicateKeyError,
    ForeignKeyViolation, CheckViolation, RecordNotFoundError
)

# Engine wording for each kind of constraint failure (SQLite, MySQL, PostgreSQL)
_DUPLICATE_MARKERS = ('unique constraint failed', 'duplicate entry', 'duplicate key value')
_FOREIGN_KEY_MARKERS = ('foreign key constraint',)
_CHECK_MARKERS = ('check constraint', 'not null constraint', 'not-null constraint', 'cannot be null')

def classify_integrity_error(error):
    """Map an IntegrityError onto the matching IntegrityViolation subclass"""
    message = str(getattr(error, 'orig', error))
    lowered = message.lower()
    
    if any(marker in lowered for marker in _DUPLICATE_MARKERS):
        return DuplicateKeyError(message)
    if any(marker in lowered for marker in _FOREIGN_KEY_MARKERS):
        return ForeignKeyViolation(message)
    if any(marker in lowered for marker in _CHECK_MARKERS):
        return CheckViolation(message)
    return IntegrityViolation(message)

def _raise_translated(error):
    db.session.rollback()
    violation = classify_integrity_error(error)
    current_app.logger.warning("Write rolled back: %s: %s", type(violation).__name__, violation)
    raise violation from error

def flush_or_raise():
    """Flush pending writes so constraint failures surface before dependent work"""
    try:
        db.session.flush()
    except IntegrityError as e:
        _raise_translated(e)

def commit_or_raise():
    """Commit the session, translating constraint failures"""
    try:
        db.session.commit()
    except IntegrityError as e:
        _raise_translated(e)

def add_and_commit(obj):
    """Add object to database and commit"""
    db.session.add(obj)
    commit_or_raise()
    return obj

def delete_and_commit(obj):
    """Delete object from database and commit"""
    db.session.delete(obj)
    commit_or_raise()

def bulk_insert(objects):
    """Insert several objects in one transaction"""
    db.session.add_all(objects)
    commit_or_raise()
    return len(objects)

def get_or_raise(model, key, label=None):
    """Get object by primary key or raise RecordNotFoundError"""
    obj = db.session.get(model, key)
    if obj is None:
        raise RecordNotFoundError(f"{label or model.__name__} {key} not found")
    return obj

__all__ = [
    'DatabaseError', 'classify_integrity_error', 'flush_or_raise', 'commit_or_raise',
    'add_and_commit', 'delete_and_commit', 'bulk_insert', 'get_or_raise'
]
