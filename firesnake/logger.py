from flask import Blueprint, request
from werkzeug.utils import secure_filename
import os, datetime, json

bp = Blueprint("logger", __name__)

UNKNOWN_SESSION = "unknown"


def logs_dir():
    return os.path.abspath(os.getenv("LOGS_DIR", "logs"))


def init_logs_dir():
    """Create the logs directory if it is missing.

    Returns the OSError that prevented it, or None. Callers are free to
    ignore the result: logging must never stop the server.
    """
    try:
        os.makedirs(logs_dir(), exist_ok=True)
    except OSError as e:
        return e
    return None


def as_text(value):
    """JSON scalars keep their JSON spelling: true, not True."""
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def normalize_session_id(session_id):
    session_id = as_text(session_id)
    if session_id is None or not session_id.strip():
        return UNKNOWN_SESSION
    # keeps [A-Za-z0-9._-] ids as they are, flattens path separators
    return secure_filename(session_id) or UNKNOWN_SESSION


def session_log_path(session_id):
    return os.path.join(logs_dir(), f"session_{normalize_session_id(session_id)}.log")


def format_line(message, now=None):
    now = now or datetime.datetime.now()
    timestamp = now.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    return f"{timestamp} | {message}\n"


def write_session_log(session_id, message):
    """Append one timestamped line to the session's log file.

    Unencodable characters (lone surrogates) are written as "?". Returns the
    OSError raised while writing, or None on success.
    """
    if message is None:
        message = ""
    try:
        err = init_logs_dir()
        if err is not None:
            return err
        with open(session_log_path(session_id), "a", encoding="utf-8", errors="replace", newline="") as f:
            f.write(format_line(message))
    except OSError as e:
        return e
    return None


@bp.route("/api/log", methods=["POST"])
def write_log():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    # best-effort: a failed write still answers 200
    _ = write_session_log(data.get("sessionId"), as_text(data.get("message")))
    return "", 200
