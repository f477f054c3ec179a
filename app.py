import logging
import os
import socket

from patent_browser.logging_config import configure_logging
from patent_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("patent_browser.app")

app = create_dash_app(os.getenv("PATENT_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def first_open_port(preferred: int, attempts: int = 100) -> int:
    """First port from 'preferred' nobody is listening on; 'preferred' if all are taken."""
    for port in range(preferred, preferred + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return preferred


def main() -> None:
    preferred = int(os.getenv("PORT", "8050"))
    port = first_open_port(preferred)
    if port != preferred:
        logger.warning("Port taken, using the next free one", extra={"preferred": preferred, "port": port})

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
