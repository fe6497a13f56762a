import logging
import re

from originlog import Logger, LoggerConfig, Origin, Tier
from originlog.origin import compose_line, render_message


def make_logger(**kw) -> Logger:
    return Logger(LoggerConfig(prefix_format="", **kw))


def test_compose_line_variants():
    o = Origin("Foo.m", 42)
    of = Origin("Foo.m", 42, "bar")
    assert compose_line(Tier.WARNING, "msg") == "WARNING: msg"
    assert compose_line(Tier.WARNING, "msg", o) == "WARNING: Foo.m:42 msg"
    assert compose_line(Tier.WARNING, "msg", of) == "WARNING: Foo.m:42 (bar) msg"
    assert compose_line(Tier.NORMAL, "msg") == "msg"
    assert compose_line(Tier.NORMAL, "msg", o) == "Foo.m:42 msg"
    assert compose_line(Tier.DEBUG, "msg", of) == "Foo.m:42 (bar) msg"


def test_normal_line_with_function_origin(capsys):
    logger = make_logger()
    logger.emit(Tier.NORMAL, "x=%d", 5, origin=Origin("Foo.m", 42, "bar"))
    err = capsys.readouterr().err
    assert err.endswith("Foo.m:42 (bar) x=5\n")


def test_warning_line(capsys):
    logger = make_logger()
    logger.warn("disk %s at %d%%", "/var", 93, origin=Origin("store.py", 7))
    assert capsys.readouterr().err == "WARNING: store.py:7 disk /var at 93%\n"


def test_default_prefix_has_timestamp_and_program(capsys):
    logger = Logger(LoggerConfig(progname="demo"))
    logger.log("hello")
    err = capsys.readouterr().err
    assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3} demo\[\d+\] hello\n$", err)


def test_message_without_args_is_verbatim():
    assert render_message("100% done", ()) == "100% done"


def test_mapping_argument():
    assert render_message("%(user)s logged in", ({"user": "ann"},)) == "ann logged in"


def test_mismatched_arguments_do_not_raise(caplog):
    with caplog.at_level(logging.WARNING, logger="originlog"):
        out = render_message("x=%d y=%d", (1,))
    assert out == "x=%d y=%d (1,)"
    assert any("does not match" in r.getMessage() for r in caplog.records)


def test_wrong_type_is_written_raw(capsys):
    logger = make_logger()
    logger.log("count=%d", "many")
    # the diagnostics logger may share stderr; only our line is checked
    assert "count=%d ('many',)" in capsys.readouterr().err.splitlines()


class Unprintable:
    def __str__(self):
        raise RuntimeError("boom")

    __repr__ = __str__


def test_unconvertible_values_do_not_raise(capsys):
    logger = make_logger()
    logger.log("x=%d", float("inf"))
    logger.warn("c=%c", 2 ** 40)
    logger.log("obj=%s", Unprintable())
    lines = capsys.readouterr().err.splitlines()
    assert "x=%d (inf,)" in lines
    assert f"WARNING: c=%c ({2 ** 40},)" in lines
    assert "obj=%s (<unprintable Unprintable object>,)" in lines


def test_unprintable_message_object(capsys):
    logger = make_logger()
    logger.log(Unprintable())
    assert "<unprintable Unprintable object>" in capsys.readouterr().err.splitlines()
