import argparse
import logging
import platform
import sys
from .. import __version__
from ..common import logformat, JvmtiError


version_text = "jvmti {} on {} {} on {}".format(
    __version__,
    platform.python_implementation(),
    platform.python_version(),
    platform.platform(),
)


def log_level(s):
    """ Converts a string to a valid logging level """
    numeric_level = getattr(logging, s.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError("Invalid log level: {}".format(s))
    return numeric_level


class OnceAction(argparse.Action):
    """ Use this action to enforce that an option is only given once """

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, "Cannot give multiple")
        setattr(namespace, self.dest, values)


base_parser = argparse.ArgumentParser(add_help=False)
base_parser.add_argument(
    "--log",
    help="Log level (info,debug,warn)",
    metavar="log-level",
    type=log_level,
    default="info",
)
base_parser.add_argument(
    "--report",
    metavar="report-file",
    action=OnceAction,
    help="Specify a file to write the log to",
    type=argparse.FileType("w"),
)
base_parser.add_argument(
    "--verbose",
    "-v",
    action="count",
    default=0,
    help="Increase verbosity of the output",
)
base_parser.add_argument(
    "--version",
    "-V",
    action="version",
    version=version_text,
    help="Display version and exit",
)


class ColoredFormatter(logging.Formatter):
    """ Custom formatter that makes vt100 coloring to log messages """

    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)
    colors = {"INFO": WHITE, "WARNING": YELLOW, "ERROR": RED}

    def format(self, record):
        reset_seq = "\033[0m"
        color_seq = "\033[1;%dm"
        levelname = record.levelname
        msg = super().format(record)
        if levelname in self.colors:
            color = color_seq % (30 + self.colors[levelname])
            msg = color + msg + reset_seq
        return msg


class LogSetup:
    """ Context manager that attaches logging to a snippet """

    def __init__(self, args):
        self.args = args
        self.console_handler = None
        self.file_handler = None
        self.logger = logging.getLogger()

    def __enter__(self):
        self.logger.setLevel(logging.DEBUG)
        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(ColoredFormatter(logformat))
        self.console_handler.setLevel(self.args.log)
        self.logger.addHandler(self.console_handler)

        if self.args.verbose > 0:
            self.console_handler.setLevel(logging.DEBUG)

        if self.args.report:
            self.file_handler = logging.StreamHandler(self.args.report)
            self.file_handler.setFormatter(logging.Formatter(logformat))
            self.logger.addHandler(self.file_handler)

        self.logger.debug("Loggers attached")
        self.logger.debug(version_text)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if isinstance(exc_value, JvmtiError):
            self.logger.error(str(exc_value.msg))
            err = True
        else:
            err = False

        self.logger.debug("Removing loggers")
        if self.args.report:
            self.logger.removeHandler(self.file_handler)
            self.args.report.close()

        self.logger.removeHandler(self.console_handler)

        # exit code when error:
        if err:
            sys.exit(1)
