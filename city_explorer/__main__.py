import uvicorn

from city_explorer.core.config import settings


def main() -> None:
    uvicorn.run("city_explorer.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
