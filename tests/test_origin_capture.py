import inspect

from originlog import FUNCTION, LINE, Logger, LoggerConfig, Origin


def make_logger(**kw) -> Logger:
    return Logger(LoggerConfig(prefix_format="", **kw))


def test_line_capture(capsys):
    logger = make_logger()
    line = inspect.currentframe().f_lineno + 1
    logger.log("here", origin=LINE)
    assert capsys.readouterr().err == f"test_origin_capture.py:{line} here\n"


def test_function_capture(capsys):
    logger = make_logger(enabled=True)
    line = inspect.currentframe().f_lineno + 1
    logger.debug("v=%s", 3, origin=FUNCTION)
    err = capsys.readouterr().err
    assert err == f"test_origin_capture.py:{line} (test_function_capture) v=3\n"


def test_warning_capture(capsys):
    logger = make_logger()
    line = inspect.currentframe().f_lineno + 1
    logger.warn("careful", origin=FUNCTION)
    err = capsys.readouterr().err
    assert err == f"WARNING: test_origin_capture.py:{line} (test_warning_capture) careful\n"


def _report(logger, message):
    logger.log(message, origin=FUNCTION, stacklevel=2)


def test_stacklevel_points_at_helper_caller(capsys):
    logger = make_logger()
    line = inspect.currentframe().f_lineno + 1
    _report(logger, "via helper")
    err = capsys.readouterr().err
    assert err == f"test_origin_capture.py:{line} (test_stacklevel_points_at_helper_caller) via helper\n"


def test_unknown_frame_placeholders():
    o = Origin.from_frame(None, with_function=True)
    assert o.describe() == "(unknown file):0 ((unknown function))"
