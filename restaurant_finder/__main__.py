"""Run the API with uvicorn: python -m restaurant_finder"""

import uvicorn

from restaurant_finder.config import settings


def main() -> None:
    uvicorn.run(
        "restaurant_finder.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
