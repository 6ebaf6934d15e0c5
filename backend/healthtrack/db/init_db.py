"""
Database initialization script.
"""
from healthtrack.core.config import get_settings
from healthtrack.db.session import Database

if __name__ == "__main__":
    print("Initializing database...")
    database = Database(get_settings())
    database.init_db()
    database.dispose()
    print("Database initialized successfully!")
