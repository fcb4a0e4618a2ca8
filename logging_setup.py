import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed = None


def configure(log_file=None, level="WARNING"):
    """Send records to log_file, or nowhere; curses owns the terminal."""
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
        _installed.close()
        _installed = None

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    _installed = handler
    return handler
