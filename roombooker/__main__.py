import uvicorn
from roombooker.config import Settings
from roombooker.main import create_app


def main():
    settings = Settings.from_env()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
