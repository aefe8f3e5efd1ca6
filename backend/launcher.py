"""Unit converter launcher — starts the API server on a free local port."""

from __future__ import annotations

import os
import socket
import sys
import traceback


def _get_log_path() -> str:
    """Return a path for the crash log next to the executable."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.join(os.path.dirname(sys.executable), "unitconv_crash.log")
    return os.path.join(os.path.dirname(__file__), "unitconv_crash.log")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def main() -> None:
    import uvicorn

    port = int(os.getenv("UNITCONV_PORT", "0")) or find_free_port()
    print(f"Serving unit converter API on http://127.0.0.1:{port}/api")
    print("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "unitconv.main:app",
        host="127.0.0.1",
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    try:
        main()
    except Exception:
        err = traceback.format_exc()
        print(err)
        try:
            with open(_get_log_path(), "w") as f:
                f.write(err)
            print(f"\nCrash log saved to: {_get_log_path()}")
        except OSError:
            print("Could not write crash log.")
        sys.exit(1)
