# python -m dafurn
import uvicorn

from dafurn.config import settings


def main() -> None:
    uvicorn.run(
        "dafurn.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
