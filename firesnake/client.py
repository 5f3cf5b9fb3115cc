import os, sys
import requests

LOGGER_URL = os.getenv("LOGGER_URL", "http://localhost:5050/api/log")


def send_log(message, session_id=None, url=LOGGER_URL):
    """Post a log line to a running server. Never raises on network errors."""
    try:
        requests.post(url, json={"sessionId": session_id, "message": message}, timeout=2)
    except requests.RequestException as e:
        print(f"warning: could not send log to {url}: {e}")
        return False
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        print("usage: firesnake-log <sessionId> <message...>")
        return 2
    return 0 if send_log(" ".join(argv[1:]), session_id=argv[0]) else 1


if __name__ == "__main__":
    sys.exit(main())
