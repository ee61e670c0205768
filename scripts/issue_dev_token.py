#!/usr/bin/env python3
"""
Issue an access token for local testing of the chat endpoints and /ws.

Production tokens come from the auth service; this signs one with the local
SECRET_KEY so the portal can be exercised without it.

Usage:
    python scripts/issue_dev_token.py <user_id> [minutes]
"""

import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path so we can import creditportal
sys.path.insert(0, str(Path(__file__).parent.parent))

from creditportal.core.security import create_access_token


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    user_id = sys.argv[1]
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else 60
    token = create_access_token(user_id, expires_delta=timedelta(minutes=minutes))

    print(f"\nAccess token for {user_id} (valid {minutes} min):\n\n{token}\n")
    print(f"curl -H 'Authorization: Bearer {token}' http://localhost:8000/api/chat/messages")
    print(f"ws://localhost:8000/ws?token={token}\n")
