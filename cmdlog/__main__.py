"""Run the API with uvicorn: ``python -m cmdlog``."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "cmdlog.main:app",
        host=os.environ.get("CMDLOG_HOST", "0.0.0.0"),
        port=int(os.environ.get("CMDLOG_PORT", "8787")),
    )


if __name__ == "__main__":
    main()
