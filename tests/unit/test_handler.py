import io
import re

import pytest

from loft.handler import Handler, StdHandler, label, new_std_handler, render, render_formatted
from loft.line_writer import LineFlags
from loft.severity import Severity


def _handler(threshold: Severity) -> tuple[StdHandler, io.StringIO]:
    sink = io.StringIO()
    return new_std_handler(threshold, sink, LineFlags.NONE), sink


@pytest.mark.parametrize("threshold", list(Severity))
def test_accepts_is_level_at_or_above_threshold(threshold: Severity) -> None:
    handler, _ = _handler(threshold)
    results = [handler.accepts(level) for level in sorted(Severity)]
    assert results == [level >= threshold for level in sorted(Severity)]
    # Once accepted, every higher level is accepted too.
    assert results == sorted(results)


def test_std_handler_satisfies_handler_protocol() -> None:
    handler, _ = _handler(Severity.INFO)
    assert isinstance(handler, Handler)
    assert handler.threshold is Severity.INFO
    assert handler.writer.flags == LineFlags.NONE


def test_label_shape() -> None:
    assert label(Severity.WARN, "testing") == "testing.WARN: "
    assert label(Severity.EMERGENCY, "app") == "app.EMERGENCY: "


def test_emit_joins_arguments_after_label() -> None:
    handler, sink = _handler(Severity.DEBUG)
    handler.emit(Severity.INFO, "testing", "ok!", 3, None)
    assert sink.getvalue() == "testing.INFO: ok! 3 None\n"


def test_emit_formatted_applies_printf_format() -> None:
    handler, sink = _handler(Severity.DEBUG)
    handler.emit_formatted(Severity.ERROR, "testing", "failed %d of %s", 2, "jobs")
    assert sink.getvalue() == "testing.ERROR: failed 2 of jobs\n"


def test_emit_formatted_without_args_keeps_format_verbatim() -> None:
    handler, sink = _handler(Severity.DEBUG)
    handler.emit_formatted(Severity.NOTICE, "testing", "100% done")
    assert sink.getvalue() == "testing.NOTICE: 100% done\n"


def test_render_formatted_accepts_a_mapping() -> None:
    assert render_formatted("%(user)s logged in", {"user": "ada"}) == "ada logged in"


def test_render_formatted_mismatch_does_not_raise() -> None:
    assert render_formatted("%d items", "many") == "%d items ('many',)"
    assert render_formatted("no placeholders", 1) == "no placeholders (1,)"


def test_render_with_no_args_is_empty() -> None:
    assert render() == ""


def test_std_handler_writes_std_header() -> None:
    sink = io.StringIO()
    handler = StdHandler(Severity.INFO, sink)
    handler.emit(Severity.INFO, "testing", "ok!")
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} testing\.INFO: ok!\n", sink.getvalue())


def test_std_handler_parses_threshold_names() -> None:
    handler = StdHandler("warn", io.StringIO())  # type: ignore[arg-type]
    assert handler.threshold is Severity.WARN
    assert not handler.accepts(Severity.NOTICE)


def test_render_separates_every_argument_with_a_space() -> None:
    assert render("a", "b") == "a b"
    assert render(1, 2) == "1 2"


def test_close_only_closes_owned_sinks() -> None:
    shared = io.StringIO()
    StdHandler(Severity.INFO, shared).close()
    assert not shared.closed

    owned = io.StringIO()
    handler = StdHandler(Severity.INFO, owned, LineFlags.NONE, close_sink=True)
    handler.close()
    assert owned.closed
    handler.emit(Severity.INFO, "testing", "after close")
