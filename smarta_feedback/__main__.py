import uvicorn

from .config.settings import settings


def main():
    uvicorn.run("smarta_feedback.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
