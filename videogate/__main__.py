"""Run the gateway with uvicorn: ``python -m videogate``."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "videogate.main:app",
        host=os.environ.get("VIDEOGATE_HOST", "0.0.0.0"),
        port=int(os.environ.get("VIDEOGATE_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
