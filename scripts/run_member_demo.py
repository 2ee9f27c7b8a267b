#!/usr/bin/env python3
"""
Log a member in, print their data, and log them out again.

Usage (from repo root):
  python scripts/run_member_demo.py --mock
  python scripts/run_member_demo.py --public-key pk_live_... --email mike+1@plasso.com --password ...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from plasso.integrations import (
    FlexkitClient,
    LoginRequest,
    MemberClient,
    MockFlexkitClient,
    PlassoAPIError,
    PlassoResponseError,
    SubscriptionRequest,
)


def setup_logging():
    """Log to terminal at INFO so every call is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


def main() -> int:
    parser = argparse.ArgumentParser(description="Plasso member demo")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock client")
    parser.add_argument("--public-key", default="pk_demo", help="Public key of the Plasso space")
    parser.add_argument("--email", default="mike+1@plasso.com")
    parser.add_argument("--password", default="password")
    args = parser.parse_args()
    setup_logging()

    client: MemberClient
    if args.mock:
        client = MockFlexkitClient()
        client.create_subscription(
            SubscriptionRequest(
                public_key=args.public_key,
                plan="demo-plan",
                email=args.email,
                name="Demo Member",
                password=args.password,
            )
        )
    else:
        client = FlexkitClient()

    try:
        member = client.login(LoginRequest(public_key=args.public_key, email=args.email, password=args.password))
        print_stage("LOGIN", {"public_key": member.public_key})

        data = member.get_data()
        print_stage("MEMBER DATA", data.model_dump())

        member.logout()
        print_stage("LOGOUT", "Member token revoked")
    except (PlassoAPIError, PlassoResponseError, httpx.HTTPError) as e:
        print(f"FAIL: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
