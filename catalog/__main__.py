"""
Run the library catalog development server.

Usage:
    python -m catalog
    python -m catalog --port 3000 --host 127.0.0.1
"""

import argparse

from . import create_app
from .config import Config


def main(argv=None):
    parser = argparse.ArgumentParser(description="Library catalog")
    parser.add_argument("--host", default=Config.HOST)
    parser.add_argument("--port", type=int, default=Config.PORT)
    parser.add_argument("--debug", action="store_true", default=Config.DEBUG)
    args = parser.parse_args(argv)

    app = create_app({"HOST": args.host, "PORT": args.port, "DEBUG": args.debug})
    app.logger.info("Server is running on http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
