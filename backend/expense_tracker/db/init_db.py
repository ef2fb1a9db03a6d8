"""
Database initialization script.

    python -m expense_tracker.db.init_db
"""
from expense_tracker.db.session import init_db

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
