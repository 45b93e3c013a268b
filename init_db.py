#!/usr/bin/env python3
"""
Database initialization script for the Student Management System
Run this script to set up the database with initial data

Usage:
  python init_db.py            create missing tables and the admin account
  python init_db.py --reset    drop and recreate every table (asks first)
  python init_db.py --sample   also load the demonstration dataset
"""

import argparse
from app import create_app
from database import reset_database

def main():
    """Main function to initialize database"""
    parser = argparse.ArgumentParser(description="Create the student management database")
    parser.add_argument('--reset', action='store_true', help='drop all tables and recreate them')
    parser.add_argument('--sample', action='store_true', help='load sample data afterwards')
    parser.add_argument('--yes', action='store_true', help='do not ask before a reset')
    args = parser.parse_args()
    
    # create_app creates any missing tables
    app = create_app()
    
    if args.reset:
        print("WARNING: This will delete all existing data!")
        confirm = 'yes' if args.yes else input("Are you sure you want to reset the database? (yes/no): ")
        if confirm.lower() == 'yes':
            reset_database(app)
            print("Database reset completed")
        else:
            print("Database reset cancelled.")
            return
    
    print(f"Database ready at {app.config['SQLALCHEMY_DATABASE_URI']}")
    
    if args.sample:
        from sample_data import load_sample_data
        with app.app_context():
            load_sample_data()

if __name__ == '__main__':
    main()
