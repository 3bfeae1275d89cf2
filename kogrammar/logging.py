"""
Configures loggers with stream / file handlers for scripts and tests.  Library code in this package only defines
module-level loggers; handlers are only added when :func:`init_logging` is called.

:author: Doug Skrypa
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from logging import LogRecord, Logger, Filter, Formatter
from pathlib import Path
from typing import Optional, Union, Collection, Iterable, Callable, Mapping

from tzlocal import get_localzone

__all__ = ['init_logging', 'ENTRY_FMT_DETAILED', 'DatetimeFormatter', 'create_filter', 'prep_log_dir']
log = logging.getLogger(__name__)

DETAILED_STREAM_LOGS = os.environ.get('KOGRAMMAR_DETAILED_LOGS', '0') == '1'

ENTRY_FMT_DETAILED = '%(asctime)s %(levelname)s %(threadName)s %(name)s %(lineno)d %(message)s'

_NotSet = object()

PathLike = Union[Path, str]
Verbosity = Union[int, bool, None]
OptStrs = Optional[Collection[str]]


def init_logging(
    verbosity: Verbosity = 0,
    *,
    log_path: PathLike | None = None,
    names: OptStrs = _NotSet,
    date_fmt: str = None,
    millis: bool = False,
    entry_fmt: str = None,
    file_fmt: str = None,
    file_lvl: int = logging.DEBUG,
    replace_handlers: bool = True,
    set_levels: Mapping[str, int] = None,
    streams: bool = True,
) -> Optional[Path]:
    """
    Configures stream handlers for stdout and stderr so that logs with level logging.INFO and below are sent to stdout
    and logs with level logging.WARNING and above are sent to stderr.  If a log_path is provided, then a file handler
    will be added as well.

    The verbosity argument affects the log level that is set for stdout:
    - 0: 20 = logging.INFO (default)
    - 1: 19 = custom 'verbose' log level
    - 2: 10 = logging.DEBUG
    - 3: 9
    - 12: 0 = highest verbosity

    :param verbosity: Higher values increase stdout output verbosity.  Default (0) results in only allowing logging.INFO
      messages and above to go to stdout.  Higher values result in lower log levels being allowed to go to stdout.
    :param log_path: The path where logs should be written, or None (default) to prevent logging to file.
    :param names: The names of the loggers for which handlers should be configured.  If set to None, or if not specified
      and ``verbosity`` > 10, then the root logger will be configured.  If not specified and ``verbosity`` <= 10, then
      the loggers for ``__main__`` and for this package are configured.
    :param date_fmt: The datetime format code to use for timestamps
    :param millis: Include milliseconds in the datetime format (ignored if ``date_fmt`` is specified)
    :param entry_fmt: The stream handler log message format to use for stdout/stderr.  If not specified, the default is
      based on the specified verbosity - '%(message)s' is used when verbosity < 3, otherwise :data:`ENTRY_FMT_DETAILED`
      is used.  The detailed format may also be forced by setting ``KOGRAMMAR_DETAILED_LOGS=1``.
    :param file_fmt: The file handler log message format.  Defaults to :data:`ENTRY_FMT_DETAILED`.
    :param file_lvl: The minimum log level that should be written to the log file, if configured.
    :param replace_handlers: Remove any existing handlers on loggers before adding handlers to them
    :param set_levels: Mapping of {str(logger name): int(level)} to set the log level for the given loggers
    :param streams: Log to stdout and stderr (default: True).
    :return: The path to which logs are being written, or None if no file handler was configured.
    """
    _configure_level_names()
    loggers = _get_loggers(names, verbosity, replace_handlers)
    root_logger = logging.getLogger()
    if root_logger in loggers:
        root_logger.addHandler(logging.NullHandler())       # Hide logs written directly to the root logger
    root_logger.setLevel(logging.NOTSET)                    # Default is 30 / WARNING

    date_fmt = date_fmt or ('%Y-%m-%d %H:%M:%S.%f %Z' if millis else '%Y-%m-%d %H:%M:%S %Z')    # used by all handlers
    if streams:
        _add_stream_handlers(loggers, verbosity, date_fmt, entry_fmt)

    if set_levels:
        if not isinstance(set_levels, dict):
            raise TypeError('levels must be a dict of logger_name=level pairs')
        for name, lvl in set_levels.items():
            logging.getLogger(name).setLevel(lvl)

    if log_path is not None:
        log_path = Path(log_path).expanduser()
        _add_file_handler(loggers, log_path, date_fmt, file_fmt, file_lvl)

    return log_path


def _add_stream_handlers(
    loggers: Iterable[Logger], verbosity: Verbosity, date_fmt: str, entry_fmt: Optional[str] = None
):
    if not entry_fmt:
        detailed = DETAILED_STREAM_LOGS or (verbosity and verbosity > 2)
        entry_fmt = ENTRY_FMT_DETAILED if detailed else '%(message)s'

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG + 2 - verbosity if verbosity else logging.INFO)
    stdout_handler.addFilter(create_filter(lambda r: r.levelno < logging.WARNING))
    stdout_handler.name = 'stdout'

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.INFO)
    stderr_handler.addFilter(create_filter(lambda r: r.levelno >= logging.WARNING))
    stderr_handler.name = 'stderr'

    stream_formatter = DatetimeFormatter(entry_fmt, date_fmt)
    stream_handlers = (stdout_handler, stderr_handler)
    for handler in stream_handlers:
        handler.setFormatter(stream_formatter)
    for logger in loggers:
        for handler in stream_handlers:
            logger.addHandler(handler)


def _add_file_handler(
    loggers: Iterable[Logger], log_path: Path, date_fmt: str, file_fmt: Optional[str], file_lvl: int
):
    from logging.handlers import TimedRotatingFileHandler

    prep_log_dir(log_path)
    file_handler = TimedRotatingFileHandler(log_path.as_posix(), when='midnight', backupCount=7, encoding='utf-8')
    file_handler.setLevel(file_lvl)
    file_handler.setFormatter(DatetimeFormatter(file_fmt or ENTRY_FMT_DETAILED, date_fmt))
    file_handler.name = log_path.as_posix()
    for logger in loggers:
        logger.addHandler(file_handler)
    log.log(19, f'Logging to {log_path}')


def _get_logger_names(names: OptStrs = _NotSet, verbosity: Verbosity = 0) -> set[Optional[str]]:
    if names is _NotSet:
        if verbosity and verbosity > 10:
            names = {None}
        else:
            names = {__name__.split('.')[0], '__main__', '__mp_main__', 'py.warnings'}
    elif names is None or isinstance(names, str):
        names = {names}
    else:
        names = set(names)

    if None in names:
        names = {None}

    return names


def _get_loggers(names: OptStrs, verbosity: Verbosity, replace_handlers: bool) -> list[Logger]:
    loggers = list(map(logging.getLogger, _get_logger_names(names, verbosity)))
    for logger in loggers:
        logger.setLevel(logging.NOTSET)  # Let handlers deal with log levels
        if replace_handlers:
            for handler in logger.handlers:
                if isinstance(handler, logging.FileHandler):
                    handler.close()  # stdout/stderr are left open
            logger.handlers = []

    return loggers


def _configure_level_names():
    lvl_names = {lvl: f'DBG_{lvl}' for lvl in range(1, 10)}
    lvl_names.update({lvl: f'Lv_{lvl}' for lvl in range(11, 19)})
    lvl_names[19] = 'VERBOSE'
    for lvl, name in lvl_names.items():
        if (name not in logging._nameToLevel) and (lvl not in logging._levelToName):  # noqa
            logging.addLevelName(lvl, name)


def create_filter(filter_fn: Callable[[LogRecord], bool]) -> Filter:
    """
    Uses the given function to filter log entries based on level number.  The function should return True if the
    record should be logged, or False to ignore it.

    :param filter_fn: A function that takes 1 parameter (record) and returns a boolean
    :return: A custom, initialized subclass of logging.Filter using the given filter function
    """
    class CustomLogFilter(Filter):
        def filter(self, record: LogRecord) -> bool:
            return filter_fn(record)

    return CustomLogFilter()


class DatetimeFormatter(Formatter):
    """Enables use of ``%f`` (micro/milliseconds) in datetime formats."""
    _local_tz = get_localzone()

    def formatTime(self, record: LogRecord, datefmt: str = None) -> str:
        dt = datetime.fromtimestamp(record.created, self._local_tz)
        if datefmt:
            return dt.strftime(datefmt)
        else:
            return self.default_msec_format % (dt.strftime(self.default_time_format), record.msecs)


def prep_log_dir(log_path: PathLike):
    """
    Creates any necessary intermediate directories in order for the given log path to be valid.

    :param log_path: Log file destination
    """
    log_dir = log_path.parent if isinstance(log_path, Path) else Path(log_path).parent
    if log_dir.exists():
        if not log_dir.is_dir():
            raise ValueError(f'Invalid log path - {log_dir} is not a directory')
    else:
        log_dir.mkdir(parents=True, exist_ok=True)
