"""Run the API with uvicorn: ``python -m mesto``."""

import uvicorn

from mesto.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("mesto.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    main()
