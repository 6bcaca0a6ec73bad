#!/usr/bin/env python3
"""
Demo script for the puzzle cache.

Sends the same puzzle request twice to a running server and shows that the
second answer comes from the cache. Start the server first:

    python -m puzzle_cache.api.app
"""

import json
import os
import sys
import time

import httpx

BASE_URL = os.getenv("PUZZLE_CACHE_URL", "http://localhost:8080")

SAMPLE_REQUESTS = [
    {"gameType": "crossword", "difficulty": "easy", "topics": ["animals", "nature"], "language": "pt"},
    {"gameType": "wordsearch", "difficulty": "medium", "topics": [], "language": "en"},
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def request_puzzle(client: httpx.Client, body: dict) -> None:
    """POST one request and print status, cache header and timing."""
    start_time = time.time()
    response = client.post("/generate-puzzle", json=body)
    elapsed_ms = (time.time() - start_time) * 1000

    cache = response.headers.get("X-Cache", "-")
    print(f"  status={response.status_code} cache={cache} time={elapsed_ms:.0f}ms")
    if response.status_code != 200:
        print(f"  error: {response.text}")
        return

    puzzle = json.loads(response.content)
    print(f"  gameType={puzzle.get('gameType')} keys={sorted(puzzle)}")


def main() -> int:
    with httpx.Client(base_url=BASE_URL, timeout=120.0) as client:
        try:
            health = client.get("/health")
        except httpx.HTTPError as e:
            print(f"Server not reachable at {BASE_URL}: {e}")
            return 1
        print(f"Health: {health.json()}")

        for body in SAMPLE_REQUESTS:
            print_section(f"{body['gameType']} / {body['difficulty']} / {body['language']}")
            print("First request (expect MISS):")
            request_puzzle(client, body)
            print("Second request (expect HIT):")
            request_puzzle(client, body)

    return 0


if __name__ == "__main__":
    sys.exit(main())
