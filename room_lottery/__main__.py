import uvicorn

from room_lottery.config import HOST, LOG_LEVEL, PORT


def main() -> None:
    uvicorn.run("room_lottery.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
