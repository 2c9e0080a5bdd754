"""Create an admin account, or promote an existing user to admin.

Usage: ``python -m scripts.set_admin --email admin@store.com --password secret [--name "Admin User"]``
"""
import argparse
import sys
from typing import Optional

from database import SessionLocal
from models import User, ROLE_ADMIN
from auth import get_password_hash


def set_admin(email: str, password: str, name: str = "Admin User") -> str:
    """Returns "created" or "updated"."""
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        password_hash = get_password_hash(password)

        if user:
            user.password_hash = password_hash
            user.name = name
            user.role = ROLE_ADMIN
            action = "updated"
        else:
            db.add(User(email=email, password_hash=password_hash, name=name, role=ROLE_ADMIN))
            action = "created"

        db.commit()
        return action
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create or promote an admin account")
    parser.add_argument("--email")
    parser.add_argument("--password")
    parser.add_argument("--name", default="Admin User")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.email or not args.password:
        print("Missing --email or --password")
        return 1

    try:
        action = set_admin(args.email, args.password, args.name)
    except Exception as e:
        print(f"Error setting admin: {e}")
        return 1

    print(f"Admin {action}: {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
