#!/usr/bin/env python3
"""Launch the warehouse inventory REST API.

Usage:
    ./start_inventory.py              # Serve on 127.0.0.1:5000
    ./start_inventory.py --port 8080  # Use custom port
"""

import argparse

import uvicorn

from inventory.log_manager import LogCapture


def main():
    parser = argparse.ArgumentParser(description="Launch warehouse inventory API")
    parser.add_argument("--port", type=int, default=5000, help="Server port (default: 5000)")
    parser.add_argument("--host", default="127.0.0.1", help="Server host (default: 127.0.0.1)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (development)")
    args = parser.parse_args()

    url = f"http://{args.host}:{args.port}"
    print(f"Inventory API running at: {url}  (docs: {url}/api/docs)")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "inventory.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    with LogCapture(label="server"):
        main()
