"""Run the catalog API with uvicorn: `python -m catalog` or `plan-router-catalog`."""

import uvicorn

from catalog.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
