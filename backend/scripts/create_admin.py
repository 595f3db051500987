# backend/scripts/create_admin.py
# Bootstrap the first administrator; further accounts can then be created through POST /users.
#   python scripts/create_admin.py --name "Ada Admin" --email admin@example.com --password secret123
import argparse
import sys

from taskboard.auth import create_user
from taskboard.db import SessionLocal
from taskboard.enums import UserRole
from taskboard.models import User


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create an administrator account.")
    p.add_argument("--name", required=True, help="Display name of the administrator.")
    p.add_argument("--email", required=True, help="Login email.")
    p.add_argument("--password", required=True, help="Initial password (at least 6 characters).")
    return p.parse_args()


def main():
    args = parse_args()
    if len(args.password) < 6:
        print("Password must be at least 6 characters.", file=sys.stderr)
        sys.exit(1)

    db = SessionLocal()
    try:
        if db.query(User).filter(User.email == args.email).first():
            print(f"A user with email {args.email} already exists.", file=sys.stderr)
            sys.exit(1)

        user = create_user(db, name=args.name, email=args.email, password=args.password, role=UserRole.ADMIN)
        print(f"Created admin {user.email} (id {user.id}).")
    finally:
        db.close()

if __name__ == "__main__":
    main()
