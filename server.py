# server.py

import logging
import sys

from werkzeug.serving import make_server

from config import AppArguments, parse_arguments, resolve_log_level
from personal_site.app import SERVER_NAME, STYLESHEET_PATH, build_router
from templates import TEMPLATE_DIR

logger = logging.getLogger('site')


def configure_logging(level):
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.setLevel(level)
    # Requests are already logged by the site middleware.
    logging.getLogger('werkzeug').setLevel(max(level, logging.WARNING))


class Application:
    """Threaded WSGI server bound to the configured address."""

    def __init__(self, router, hostname, port):
        self.router = router
        self.hostname = hostname
        self._server = make_server(hostname, port, router, threaded=True)

    @property
    def port(self):
        return self._server.server_port

    def run(self):
        logger.info("%s listening on http://%s:%d", SERVER_NAME, self.hostname, self.port)
        try:
            self._server.serve_forever()
        finally:
            self.close()

    def shutdown(self):
        self._server.shutdown()

    def close(self):
        self._server.server_close()


def build_application(arguments: AppArguments,
                      templates_dir=TEMPLATE_DIR,
                      stylesheet_path=STYLESHEET_PATH) -> Application:
    configure_logging(resolve_log_level(arguments.log_level))
    router = build_router(templates_dir, stylesheet_path)
    return Application(router, arguments.hostname, arguments.port)


def main(argv=None):
    app = build_application(parse_arguments(argv))
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == '__main__':
    main()
