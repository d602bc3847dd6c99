from cospdf.log import LogContext, LogLevel, LogMessageLevel, get_default_log_context


def _recording(level):
    records = []
    context = LogContext(level, lambda ctx, lvl, msg: records.append((lvl, msg)))
    return context, records


def test_message_levels_line_up_with_context_levels():
    context, records = _recording(LogLevel.FATAL)
    context.log(LogMessageLevel.FATAL, "kept")
    context.log(LogMessageLevel.ERROR, "dropped")
    assert records == [(LogMessageLevel.FATAL, "kept")]

    context, records = _recording(LogLevel.TRACE)
    context.log(LogMessageLevel.TRACE, "deepest")
    assert records == [(LogMessageLevel.TRACE, "deepest")]


def test_messages_filtered_by_level():
    context, records = _recording(LogLevel.WARNING)
    context.error("bad")
    context.warning("careful")
    context.info("hidden")
    context.trace("hidden too")
    assert records == [(LogMessageLevel.ERROR, "bad"), (LogMessageLevel.WARNING, "careful")]


def test_level_none_suppresses_everything():
    context, records = _recording(LogLevel.NONE)
    context.fatal("nothing")
    assert records == []


def test_formatting_with_arguments():
    context, records = _recording(LogLevel.TRACE)
    context.trace("%s has %d entries", "table", 4)
    assert records == [(LogMessageLevel.TRACE, "table has 4 entries")]


def test_no_arguments_leaves_percent_alone():
    context, records = _recording(LogLevel.INFO)
    context.info("100% done")
    assert records[0][1] == "100% done"


def test_set_level():
    context, records = _recording(LogLevel.ERROR)
    context.info("skipped")
    context.level = LogLevel.INFO
    context.info("shown")
    assert context.level is LogLevel.INFO
    assert records == [(LogMessageLevel.INFO, "shown")]


def test_log_func_receives_context_and_user_data():
    seen = []
    context = LogContext(LogLevel.TRACE, lambda ctx, lvl, msg: seen.append(ctx.user_data), user_data="data")
    context.log(LogMessageLevel.INFO, "x")
    assert seen == ["data"]


def test_default_context_is_shared_and_writes_stderr(capsys):
    context = get_default_log_context()
    assert get_default_log_context() is context
    context.error("failure %d", 7)
    assert "failure 7" in capsys.readouterr().err