"""Initialize the database - creates all tables and seeds the singleton content documents."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.database import SessionLocal, engine, Base
import portfolio.models  # noqa: F401 - registers all models
from portfolio.services import content_service


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = content_service.seed_all(db)
    finally:
        db.close()
    if created:
        print(f"Seeded default content: {', '.join(created)}")
    else:
        print("Default content already present. Skipping seed.")
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
