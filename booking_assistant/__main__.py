import uvicorn

from booking_assistant.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run("booking_assistant.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
