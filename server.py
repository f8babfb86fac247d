import sys

from dotenv import load_dotenv

from blog import create_app
from blog.config import GatewaySettings
from blog.utils.logs import setup_logging


load_dotenv()
settings = GatewaySettings.from_env()
setup_logging(settings.log_level)

app = create_app(settings)


def main() -> int:
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
