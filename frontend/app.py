# frontend/app.py

import argparse

from flask import Flask
from frontend.api import api_blueprint


def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(api_blueprint, url_prefix="/api")
    return app


app = create_app()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the board annotator over HTTP.")
    parser.add_argument("--host", default="127.0.0.1", help="address to bind")
    parser.add_argument("--port", type=int, default=5000, help="port to listen on")
    parser.add_argument("--debug", action="store_true", help="run Flask in debug mode")
    args = parser.parse_args(argv)

    print(f"Annotator API listening on http://{args.host}:{args.port}/api/annotate")
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
