# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DocumentSyntaxError(ValueError):
    """Malformed JSON/XML input.

    Carries the parser message and, when it could be recovered,
    the 1-based `Position` of the error.
    """

    def __init__(self, message, position=None):
        super(DocumentSyntaxError, self).__init__(message)
        self.message = message
        self.position = position


class EmptyInputError(DocumentSyntaxError):

    def __init__(self, message="Input is empty"):
        super(EmptyInputError, self).__init__(message)


class NormalizationError(RuntimeError):
    pass


class InputTooLargeError(ValueError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for jxdiff entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all jxdiff loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_jxdiff_log_level(level, set_main=True):
    """Set a log level for jxdiff loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('jxdiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
