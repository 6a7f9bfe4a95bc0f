"""
Database initialization script.
"""
from app.db.session import SessionLocal, init_db
from app.services.route_service import seed_routes

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        added = seed_routes(db)
    finally:
        db.close()
    print(f"Database initialized successfully! ({added} routes added)")
