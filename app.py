"""
Student Management System
Flask application factory hosting configuration, logging and the database session
"""

import logging
from flask import Flask
from config import Config
from database import db, init_db

def create_app(config_class=Config):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)
    
    # Initialize extensions with app
    db.init_app(app)
    
    # Initialize database
    init_db(app)
    
    return app

if __name__ == '__main__':
    app = create_app()
    print(f"Database initialized at {app.config['SQLALCHEMY_DATABASE_URI']}")
