import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(threadName)s] %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """
    Stream handler bound to whatever ``sys.stderr`` is at emit time.

    A plain StreamHandler keeps the stream it was created with. When
    ``sys.stderr`` is swapped afterwards (pytest capture, redirect_stderr),
    records would go to a replaced or closed stream. The stream is not
    settable: setStream() raises instead of being ignored.
    """

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr

    def setStream(self, stream):
        raise TypeError(f"{type(self).__name__} always writes to sys.stderr")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once.

    Log records go to stderr so stdout only carries what the application
    prints itself. Safe to call multiple times; later calls only change the
    level.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, "_maven_essentials_configured", False):
        return

    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    setattr(root, "_maven_essentials_configured", True)
