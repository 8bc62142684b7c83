"""Run the service with uvicorn: `python -m catalog`."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "catalog.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
