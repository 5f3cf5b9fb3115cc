from flask import Flask, render_template
from flask_cors import CORS
import os

from firesnake.logger import bp as logger_bp, init_logs_dir

app = Flask(__name__)
CORS(app)
app.register_blueprint(logger_bp)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5050"))

BANNER = """
╔══════════════════════════════════════════════════════════╗
║           FIRE SNAKE GAME                                ║
║   Open your browser: {url:<36}║
╚══════════════════════════════════════════════════════════╝
"""


@app.route("/", methods=["GET"])
def index():
    return render_template("index.html")


def print_banner(port=PORT):
    print(BANNER.format(url=f"http://localhost:{port}"))


def main():
    # a missing logs dir is retried on every write, so startup never fails here
    init_logs_dir()
    print_banner()
    app.run(host=HOST, port=PORT)


if __name__ == "__main__":
    main()
