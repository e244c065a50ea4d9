#!/usr/bin/env python3
"""Send a sample analysis request to a running backend.

Posts a JSON payload file to /analyze-text and prints the status and body.
Run from the backend/ directory:
    python send_test_request.py [payload.json] [--url http://localhost:5000]

The payload must contain "resumeText" and "jobDescription".
"""

import argparse
import sys
from pathlib import Path

import httpx


def send(payload_path: Path, base_url: str, timeout_s: float) -> int:
    if not payload_path.exists():
        print(f"[ERROR] Payload file not found: {payload_path}")
        return 1

    try:
        response = httpx.post(
            f"{base_url.rstrip('/')}/analyze-text",
            content=payload_path.read_bytes(),
            headers={"Content-Type": "application/json"},
            timeout=timeout_s,
        )
    except httpx.HTTPError as e:
        print(f"[ERROR] Request failed: {e}")
        return 1

    print("Status:", response.status_code)
    print("Body:", response.text)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("payload", nargs="?", default="test_payload.json")
    parser.add_argument("--url", default="http://localhost:5000")
    parser.add_argument("--timeout", type=float, default=60.0, help="seconds")
    args = parser.parse_args()
    sys.exit(send(Path(args.payload), args.url, args.timeout))
