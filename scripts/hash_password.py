"""Print a bcrypt hash for VIEWER_PASSWORD_HASH / ADMIN_PASSWORD_HASH.

Usage:
    python scripts/hash_password.py            # prompts for the password
"""

import getpass

import bcrypt


def main() -> None:
    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat: "):
        raise SystemExit("Passwords do not match")
    print(bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode())


if __name__ == "__main__":
    main()
