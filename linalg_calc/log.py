"""
Step logger used to explain computations.

Loggers form a stack. ``log`` appends a formatted LaTeX line to whichever
logger is on top, so a caller can capture the explanation of a single
computation by pushing a fresh logger around it (``nest_logger``) and
reading it back afterwards.
"""

from typing import Callable, List, Optional

from .fmt import pcformat


class Logger:
    accum: List[str]
    level_limit: int = 0
    auto_print: bool = False

    def __init__(self, accum: List[str] = None, level_limit: int = 0):
        self.accum = accum if accum is not None else []
        self.level_limit = level_limit

    def log(self, message: str, level=0):
        if level > self.level_limit:
            return
        self.accum.append(message)
        if self.auto_print:
            print(message)

    def clear(self):
        self.accum.clear()

    def __str__(self):
        return "\n".join(self.accum)


def push_logger(logger: Optional[Logger] = None) -> Logger:
    global current_logger
    if logger is None:
        logger = Logger()
    logger_stack.append(logger)
    current_logger = logger
    return logger


def pop_logger() -> Logger:
    global current_logger
    if len(logger_stack) <= 1:
        raise ValueError("No nested logger to pop")
    ret = logger_stack.pop()
    current_logger = logger_stack[-1]
    return ret


def log(message: str, *args):
    raw_log(pcformat(message, *args))


def raw_log(message: str):
    current_logger.log(message)


class LoggerGuard:
    def __init__(self, logger: Logger = None, append_logs: List[str] = None):
        self.logger = logger
        self.append_logs = append_logs

    def __enter__(self) -> Logger:
        self.logger = push_logger(self.logger)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        lg = pop_logger()
        if self.append_logs is not None and lg.accum:
            self.append_logs.append(str(lg))
        return False


def nest_logger(logger: Logger = None) -> LoggerGuard:
    return LoggerGuard(logger)


def nest_appending_logger(logs_list: List[str]) -> LoggerGuard:
    return LoggerGuard(append_logs=logs_list)


def ignore_log(f: Callable):
    with nest_logger():
        return f()


def capture_logs(f: Callable) -> str:
    with nest_logger() as lg:
        f()
    return str(lg)


current_logger: Logger = None
logger_stack: List[Logger] = []
global_logger = Logger()
push_logger(global_logger)
