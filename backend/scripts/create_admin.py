"""Provision an administrator account.

Usage:
  python scripts/create_admin.py admin@example.com mypassword123
"""
import argparse
import os
import re
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.database import Base, SessionLocal, engine
import portfolio.models  # noqa: F401
from portfolio.services import auth_service
from portfolio.utils.errors import AdminAlreadyExistsError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def main():
    parser = argparse.ArgumentParser(description="Create an admin user for the portfolio admin panel")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()

    if not EMAIL_RE.match(args.email):
        parser.error("Please provide a valid email address")
    if len(args.password) < MIN_PASSWORD_LENGTH:
        parser.error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        print("Creating admin user...")
        admin = auth_service.create_admin(db, args.email, args.password)
    except AdminAlreadyExistsError as exc:
        print(f"Failed to create admin user: {exc.detail}", file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()

    print("Admin user created successfully!")
    print(f"Email: {admin.email}")
    print("You can now use these credentials to log in to the admin panel.")


if __name__ == "__main__":
    main()
