import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(loglevel="info", silence=("py4j",)):
    # py4j logs every gateway call at INFO
    for noisy in silence:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root = logging.getLogger()

    # avoid duplicates if called twice
    if root.handlers:
        root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(loglevel.upper())
