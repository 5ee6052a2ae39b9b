"""Utility script to create an administrator account in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.roles import create_role
from app.application.use_cases.users import assign_role, create_user
from app.config import load_settings
from app.domain.exceptions import DomainError
from app.infrastructure.database import (
    create_database_engine,
    create_session_factory,
    initialize_database,
)
from app.infrastructure.repositories import RoleRepository

ADMIN_ROLE = "admin"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator account for the API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the user (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address used to log in (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the account. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the admin role if needed and an administrator holding it."""

    args = parse_args()

    password = args.password or getpass("Password for the new administrator: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    settings = load_settings()
    engine = create_database_engine(settings.database)
    initialize_database(engine)

    session = create_session_factory(engine)()
    try:
        role = RoleRepository(session).get_by_name(ADMIN_ROLE) or create_role(
            session, name=ADMIN_ROLE
        )
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
        )
        user = assign_role(session, user_id=user.id, role_id=role.id)
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user in the database: {exc}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Roles: {', '.join(role.name for role in user.roles)}"
        )
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    main()
