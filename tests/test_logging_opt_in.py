import logging

from patchforge import patch
from patchforge._logging import NoopLogger, resolve_logger


def test_noop_logger_discards_records(caplog):
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    with caplog.at_level(logging.DEBUG):
        lg.debug("hello")
        lg.warning("world")
    assert caplog.records == []


def test_enabled_logger_defaults_to_package_name_at_debug():
    lg = resolve_logger(enabled=True)
    assert lg.name == "patchforge"
    # the engine only emits debug records
    assert lg.level == logging.DEBUG
    assert lg.propagate


def test_enabled_logger_honours_explicit_level():
    lg = resolve_logger(enabled=True, name="patchforge.quiet", level=logging.WARNING)
    assert lg.level == logging.WARNING


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom) is custom


def test_patch_is_silent_by_default(caplog, ambiguous_document):
    with caplog.at_level(logging.DEBUG):
        patch(ambiguous_document, "OLD:\nconsole.log(data);\nNEW:\nprint(data)")
    assert not [rec for rec in caplog.records if rec.name.startswith("patchforge")]


def test_patch_logs_search_when_enabled(caplog, ambiguous_document):
    with caplog.at_level(logging.DEBUG, logger="patchforge"):
        patch(ambiguous_document, "OLD:\nconsole.log(data);\nNEW:\nprint(data)", log=True)
    messages = [rec.message for rec in caplog.records]
    assert any("searching 1 line(s)" in m for m in messages)
    assert any("after dedupe" in m for m in messages)


def test_patch_logs_rejection_to_passed_logger(caplog):
    custom = logging.getLogger("host.patcher")
    with caplog.at_level(logging.DEBUG, logger="host.patcher"):
        patch("a\nb\n", "   ", logger=custom)
    assert any("empty_block" in rec.message for rec in caplog.records)
