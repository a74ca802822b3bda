"""
Create a user (e.g. first admin or the guest identity). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD NAME [role]
Examples:
  python -m app.scripts.create_user admin your-secure-password "Admin" ADMIN
  python -m app.scripts.create_user guest unused-secret "Guest" GUEST
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.core.security import BCRYPT_MAX_BYTES, hash_password, secret_fits_bcrypt
from app.models.user import User, UserRole

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 20


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a PICCE user.")
    parser.add_argument("username", help=f"Username ({USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (non-empty, at most {BCRYPT_MAX_BYTES} bytes)")
    parser.add_argument("name", help="Display name")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.USER.value,
        choices=[role.value for role in UserRole],
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        logger.error("Invalid username length.")
        return 1
    if not args.password:
        logger.error("Password must not be empty.")
        return 1
    if not secret_fits_bcrypt(args.password):
        logger.error("Password must be at most %s bytes in UTF-8.", BCRYPT_MAX_BYTES)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            logger.error("User '%s' already exists.", username)
            return 1
        user = User(
            name=args.name,
            username=username,
            password_hash=hash_password(args.password),
            role=UserRole(args.role),
        )
        db.add(user)
        db.commit()
        logger.info("Created user '%s' with role '%s' (id=%s).", username, args.role, user.id)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
