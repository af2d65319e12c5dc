"""Seed script: pushes a data room payload to a running server as a new draft.

Usage:
    python scripts/seed.py data.json                      # uses http://localhost:8000
    python scripts/seed.py data.json --publish            # publish the new draft too
    python scripts/seed.py data.json --url http://host --password <admin password>
"""

import argparse
import json
import sys
from pathlib import Path

import httpx


def login(client: httpx.Client, base_url: str, password: str) -> dict:
    resp = client.post(f"{base_url}/api/auth/login", json={"password": password})
    resp.raise_for_status()
    body = resp.json()
    if body["role"] != "admin":
        sys.exit("Seeding needs the admin password")
    return {"Authorization": f"Bearer {body['accessToken']}"}


def create_draft(client: httpx.Client, base_url: str, headers: dict, data: list) -> tuple[int, int]:
    resp = client.post(f"{base_url}/api/revisions", json={"data": data}, headers=headers)
    resp.raise_for_status()
    body = resp.json()
    print(f"  Created draft v{body['version']}.{body['minor']}")
    return body["version"], body["minor"]


def publish(client: httpx.Client, base_url: str, headers: dict, version: int, minor: int) -> None:
    resp = client.post(
        f"{base_url}/api/publish/{version}", params={"minor": minor}, headers=headers
    )
    resp.raise_for_status()
    print(f"  Published v{version} (from draft .{minor})")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("data_file", type=Path)
    parser.add_argument("--url", default="http://localhost:8000")
    parser.add_argument("--password", help="admin password, when the access gate is enabled")
    parser.add_argument("--publish", action="store_true")
    args = parser.parse_args()

    data = json.loads(args.data_file.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        sys.exit(f"{args.data_file} must contain a JSON array of categories")

    base_url = args.url.rstrip("/")
    print(f"Seeding against {base_url}\n")

    with httpx.Client(timeout=10) as client:
        headers = login(client, base_url, args.password) if args.password else {}
        version, minor = create_draft(client, base_url, headers, data)
        if args.publish:
            publish(client, base_url, headers, version, minor)

    print("\nDone!")


if __name__ == "__main__":
    main()
