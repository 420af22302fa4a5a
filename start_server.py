#!/usr/bin/env python3
"""Start the CrimeSpotter API with uvicorn on the port given by $PORT."""

import os
import sys
from pathlib import Path

import uvicorn

DEFAULT_PORT = 3000


def _resolve_port() -> int:
    raw = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: Invalid PORT value '{raw}', using default {DEFAULT_PORT}", file=sys.stderr)
        return DEFAULT_PORT


def main() -> int:
    # Allow running from a source checkout without installing the package
    src_path = Path(__file__).resolve().parent / "src"
    if src_path.is_dir() and str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    port = _resolve_port()
    environment = os.environ.get("CRIMESPOTTER_ENVIRONMENT", "development")
    print(f"Starting CrimeSpotter UK on port {port} ({environment})", file=sys.stderr)
    print(f"Health check: http://localhost:{port}/health", file=sys.stderr)

    uvicorn.run(
        "crimespotter.main:app",
        host="0.0.0.0",
        port=port,
        proxy_headers=True,  # honour X-Forwarded-Proto behind a proxy/CDN
        forwarded_allow_ips="*",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
