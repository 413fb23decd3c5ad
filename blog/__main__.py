import uvicorn

from blog.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("blog.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
