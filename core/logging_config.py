"""
Logging Configuration - Centralized logging setup

Cung cap logging nhat quan cho toan bo app.
Tat ca output (per-file results, errors, debug content) di qua MOT sink:
stdout (mac dinh) hoac log file (--log-file, append mode).

Thread safety:
- Worker threads KHONG ghi truc tiep vao sink
- Moi record duoc day vao queue qua QueueHandler
- Mot QueueListener thread duy nhat drain queue va ghi tung dong hoan chinh
"""

import logging
import logging.handlers
import queue
import sys
from typing import Optional

from config.paths import APP_NAME, DEBUG_MODE

LOGGER_NAME = APP_NAME

# Console: diagnostics co timestamp, per-file result lines giu nguyen message
CONSOLE_FORMAT = "%(asctime)s %(message)s"
CONSOLE_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
RESULT_FORMAT = "%(message)s"
RESULT_FLAG = "result_line"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Listener singleton - chi co mot writer thread tai moi thoi diem
_listener: Optional[logging.handlers.QueueListener] = None
_queue_handler: Optional[logging.handlers.QueueHandler] = None
_sink_handler: Optional[logging.Handler] = None


class LogFileError(OSError):
    """Log file khong mo duoc de ghi (fatal configuration error)."""


class ConsoleFormatter(logging.Formatter):
    """
    Formatter cho stdout sink.

    Record co RESULT_FLAG (per-file result line) duoc ghi nguyen message,
    moi record khac (errors, skip, debug) co prefix timestamp.
    """

    def __init__(self):
        super().__init__(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)
        self._result_formatter = logging.Formatter(RESULT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, RESULT_FLAG, False):
            return self._result_formatter.format(record)
        return super().format(record)


def open_sink_handler(log_file: Optional[str] = None) -> logging.Handler:
    """
    Tao handler cho output sink.

    Args:
        log_file: Duong dan log file, None hoac "" = stdout

    Returns:
        StreamHandler(stdout) hoac FileHandler o append mode

    Raises:
        LogFileError: Neu log file khong mo duoc
    """
    if not log_file:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ConsoleFormatter())
        return handler

    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        raise LogFileError(e.errno, e.strerror, log_file) from e

    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    log_file: Optional[str] = None, debug: bool = False
) -> logging.Logger:
    """
    Cau hinh app logger voi single-consumer log channel.

    Goi lai setup_logging() se shutdown listener cu truoc.

    Args:
        log_file: Duong dan log file, None = stdout
        debug: Bat DEBUG level (log noi dung file)

    Returns:
        Configured logger instance

    Raises:
        LogFileError: Neu log file khong mo duoc
    """
    global _listener, _queue_handler, _sink_handler

    shutdown_logging()

    # Mo sink truoc: neu fail thi khong co gi duoc start
    sink = open_sink_handler(log_file)

    log_queue: "queue.Queue[logging.LogRecord]" = queue.Queue(-1)
    queue_handler = logging.handlers.QueueHandler(log_queue)
    listener = logging.handlers.QueueListener(
        log_queue, sink, respect_handler_level=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if (debug or DEBUG_MODE) else logging.INFO)
    logger.propagate = False
    logger.addHandler(queue_handler)

    listener.start()

    _listener = listener
    _queue_handler = queue_handler
    _sink_handler = sink
    return logger


def shutdown_logging() -> None:
    """
    Drain log queue va dong sink.

    Goi truoc khi in final total de dam bao moi per-file line
    da duoc ghi xong. An toan khi goi nhieu lan.
    """
    global _listener, _queue_handler, _sink_handler

    logger = logging.getLogger(LOGGER_NAME)

    if _listener is not None:
        # stop() xu ly het records con trong queue roi moi join thread
        _listener.stop()
        _listener = None

    if _queue_handler is not None:
        logger.removeHandler(_queue_handler)
        _queue_handler = None

    if _sink_handler is not None:
        _sink_handler.flush()
        # Khong dong sys.stdout
        if isinstance(_sink_handler, logging.FileHandler):
            _sink_handler.close()
        _sink_handler = None

    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger() -> logging.Logger:
    """
    Lay app logger.

    Returns:
        Logger "token-count" (chua co handler neu setup_logging() chua duoc goi)
    """
    return logging.getLogger(LOGGER_NAME)


def log_error(message: str, exc: Optional[Exception] = None):
    """Log error voi optional exception details"""
    logger = get_logger()
    if exc:
        logger.error(f"{message}: {exc}", exc_info=DEBUG_MODE)
    else:
        logger.error(message)


def log_warning(message: str):
    """Log warning"""
    get_logger().warning(message)


def log_info(message: str):
    """Log info"""
    get_logger().info(message)


def log_debug(message: str):
    """Log debug - chi ghi khi logger o DEBUG level"""
    get_logger().debug(message)


def log_result(message: str):
    """Log per-file result line (khong timestamp tren stdout)"""
    get_logger().info(message, extra={RESULT_FLAG: True})
