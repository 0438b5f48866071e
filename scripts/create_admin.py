from __future__ import annotations

import argparse
import secrets
import string

from app.config import build_sqlalchemy_db_url, settings
from app.database import Base, SessionLocal, engine
from app.models.user import ROLE_ADMIN, User
from app.utils.password_hash import hash_password


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create an admin account, or promote an existing account to the admin role."
    )
    parser.add_argument("--email", required=True, help="Admin user email")
    parser.add_argument("--password", default=None, help="Admin user password (generated if omitted)")
    parser.add_argument("--name", default="Admin", help="Display name")
    parser.add_argument(
        "--update-password",
        action="store_true",
        help="If the user exists, overwrite their password",
    )

    args = parser.parse_args(argv)
    email = args.email.strip().lower()

    _ensure_tables()

    password = args.password or _generate_password()

    with SessionLocal() as db:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            user = User(email=email, password=hash_password(password), name=args.name, role=ROLE_ADMIN)
            db.add(user)
            created = True
        else:
            created = False
            user.role = ROLE_ADMIN
            if args.update_password:
                user.password = hash_password(password)
        db.commit()
        db.refresh(user)

    if created:
        # Print the password so the operator can log in immediately.
        print(f"created admin id={user.id} email={email}")
        if args.password is None:
            print(f"generated password: {password}")
    else:
        print(f"promoted existing user to admin email={email}")
        if args.update_password:
            print("password updated")
        elif args.password is None:
            print("(password not changed)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
