import logging
import sys

_PACKAGE_PREFIX = "chess_adjudication."
_THIRD_PARTY_LOGGERS = ("chess", "chess.pgn")


class _PackageNameFilter(logging.Filter):
    """Show ``engine`` instead of ``chess_adjudication.engine`` in log lines."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.short_name = record.name.removeprefix(_PACKAGE_PREFIX)
        return True


def configure_logging(*, verbose: bool = False, level: str = "INFO") -> None:
    """Configure root logger for CLI output on stderr.

    ``verbose`` forces DEBUG; otherwise ``level`` (a logging level name, usually
    from the ``logging.level`` setting) applies.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(_PackageNameFilter())
    handler.setFormatter(logging.Formatter("cara %(levelname)s %(short_name)s: %(message)s"))
    root.addHandler(handler)

    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
