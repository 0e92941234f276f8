import logging
import os

from portfolio import create_app

DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def get_port(environ=None):
    """Return the port to listen on, read from ``PORT`` (default 3000).

    :param environ: Environment mapping, ``os.environ`` when omitted.
    :type environ: dict or None
    :returns: The port number.
    :rtype: int
    """
    if environ is None:
        environ = os.environ
    return int(environ.get("PORT") or DEFAULT_PORT)


app = create_app()


if __name__ == "__main__": # pragma: no cover
    logging.basicConfig(level=logging.INFO)
    port = get_port()
    logger.info("%s running at http://localhost:%s", app.config["SITE_TITLE"], port)
    app.run(host="0.0.0.0", port=port)
