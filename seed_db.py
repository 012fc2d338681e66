"""
Script to seed the database with sample data.
Run with: python seed_db.py

Only useful with a file-backed DATABASE_URL (e.g. sqlite:///./toddlespot.db);
the default in-memory database disappears when the script exits.
"""
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from sqlalchemy.orm import Session  # noqa: E402

from app.db.session import SessionLocal, init_db  # noqa: E402
from app.seed.seed_data import seed_db  # noqa: E402


def main():
    """Main function to seed the database."""
    print("Initializing database...")
    init_db()

    print("Seeding database...")
    db: Session = SessionLocal()
    try:
        seed_db(db)
    finally:
        db.close()
    print("Done!")


if __name__ == "__main__":
    main()
