#!/usr/bin/env python3
# main.py
"""
Runs the hole: a personal Gopher site.

ENV (all optional):
  HOLE_HOST          -> host to bind and advertise in menus (default: localhost)
  HOLE_PORT          -> TCP port (default: 7070)
  HOLE_GUESTBOOK     -> guestbook file (default: guestbook.txt)
  HOLE_READ_TIMEOUT  -> seconds to wait for a request line (default: wait forever)
  HOLE_VERBOSE       -> 1/true to also print client disconnects
"""

import sys
from typing import Optional

from hole.config import Config
from hole.events import subscribe_console_logging
from hole.guestbook import Guestbook
from hole.pages import register_pages
from hole.server import GopherServer


def build_server(config: Config) -> GopherServer:
    server = GopherServer(config.host, config.port, read_timeout=config.read_timeout)
    register_pages(server.router, Guestbook(config.guestbook_path))
    return server


def main(config: Optional[Config] = None) -> int:
    config = config or Config.from_env()
    subscribe_console_logging(verbose=config.verbose)
    server = build_server(config)
    try:
        server.listen()
    except OSError as exc:
        sys.stderr.write(f"[ERROR] Cannot listen on {config.host}:{config.port}: {exc}\n")
        return 2

    print(f"Hole is opened on gopher://{server.host}:{server.port}/")
    thread = server.start_background()
    try:
        while thread.is_alive():
            thread.join(1)
    except KeyboardInterrupt:
        print("Exiting.")
    finally:
        server.shutdown()
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
