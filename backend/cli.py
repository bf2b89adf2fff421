"""CLI tool for admin operations.

Usage:
    python -m backend.cli create-superuser
    python -m backend.cli copy-db <source_url> <target_url>
"""

import sys
import getpass

from sqlalchemy import create_engine, inspect, text
from sqlmodel import Session, SQLModel

from backend.database import engine, create_db_and_tables
from backend.models.user import UserRole
from backend.services.auth import hash_password, generate_totp_secret, get_totp_uri
from backend.services.encryption import encrypt
from backend.services.errors import AlreadyRegistered
from backend.services.users import UserStore
from backend.utils.logging import setup_logging

# Tables ordered by FK dependencies (parents first)
TABLE_ORDER = [
    "user",
    "recovery_code",
    "player",
    "best_album",
    "sms",
    "yancey_music",
]


def create_superuser():
    """Create a superuser with TOTP already enrolled."""
    setup_logging()
    create_db_and_tables()

    email = input("Email: ").strip().lower()
    username = input("Username: ").strip()
    if not email or not username:
        print("Email and username cannot be empty.")
        sys.exit(1)

    password = getpass.getpass("Password: ")
    password_confirm = getpass.getpass("Confirm password: ")
    if password != password_confirm:
        print("Passwords do not match.")
        sys.exit(1)

    totp_secret = generate_totp_secret()
    totp_uri = get_totp_uri(totp_secret, email)

    with Session(engine) as session:
        store = UserStore(session)
        if store.find_by_email(email) or store.find_by_username(username):
            print(f"User '{username}' <{email}> already exists.")
            sys.exit(1)
        try:
            store.create(
                email=email,
                username=username,
                hashed_password=hash_password(password),
                role=UserRole.SUPERUSER,
                totp_secret_encrypted=encrypt(totp_secret),
            )
        except AlreadyRegistered as e:
            print(e.message)
            sys.exit(1)

    print(f"\nSuperuser '{username}' created successfully.")
    print(f"\nTOTP Secret: {totp_secret}")
    print(f"TOTP URI: {totp_uri}")
    print("\nScan the QR code below with your authenticator app, then confirm a code")
    print("through /api/auth/totp/validate to switch two-factor on:")

    import qrcode
    qr = qrcode.QRCode(box_size=1, border=1)
    qr.add_data(totp_uri)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


def copy_database(source_url: str, target_url: str) -> dict[str, int]:
    """Copy every table from one database into another, replacing target rows.

    Returns the number of rows copied per table.
    """
    import backend.models  # noqa: F401

    src = create_engine(source_url)
    dst = create_engine(target_url)
    SQLModel.metadata.create_all(dst)

    src_tables = set(inspect(src).get_table_names())
    copied: dict[str, int] = {}

    for table_name in TABLE_ORDER:
        if table_name not in src_tables:
            print(f"  SKIP {table_name} (not in source)")
            continue

        with src.connect() as src_conn:
            rows = src_conn.execute(text(f'SELECT * FROM "{table_name}"')).mappings().all()

        with dst.connect() as dst_conn:
            dst_conn.execute(text(f'DELETE FROM "{table_name}"'))
            if rows:
                columns = list(rows[0].keys())
                col_list = ", ".join(f'"{c}"' for c in columns)
                param_list = ", ".join(f":{c}" for c in columns)
                dst_conn.execute(
                    text(f'INSERT INTO "{table_name}" ({col_list}) VALUES ({param_list})'),
                    [dict(row) for row in rows],
                )
                # PostgreSQL serial columns do not advance on explicit ids
                if dst.dialect.name == "postgresql" and "id" in columns:
                    max_id = max(row["id"] for row in rows)
                    dst_conn.execute(
                        text("SELECT setval(pg_get_serial_sequence(:table, 'id'), :val)"),
                        {"table": f'"{table_name}"', "val": max_id},
                    )
            dst_conn.commit()

        copied[table_name] = len(rows)
        print(f"  {table_name}: {len(rows)} rows copied")

    src.dispose()
    dst.dispose()
    return copied


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m backend.cli <command>")
        print("Commands: create-superuser, copy-db")
        sys.exit(1)

    command = sys.argv[1]
    if command == "create-superuser":
        create_superuser()
    elif command == "copy-db" and len(sys.argv) == 4:
        copy_database(sys.argv[2], sys.argv[3])
        print("\nCopy complete!")
    else:
        print(f"Unknown command or wrong arguments: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
