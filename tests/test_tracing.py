import pytest

from restwire import tracing


class ListLogger:
    def __init__(self):
        self.lines = []

    def info(self, msg, *args):
        self.lines.append(msg % args if args else msg)


@pytest.fixture(autouse=True)
def restore_state():
    saved_logger = tracing.get_logger()
    saved_trace_logger = tracing._current_trace_logger()
    saved_flag = tracing.is_tracing()
    yield
    tracing.set_logger(saved_logger)
    tracing.trace_logger(saved_trace_logger)
    tracing.enable_tracing(saved_flag)


def test_trace_logger_enables_tracing_and_sets_target():
    logger = ListLogger()
    tracing.trace_logger(logger)
    assert tracing.is_tracing() is True
    assert tracing._current_trace_logger() is logger


def test_enable_tracing_switches_flag():
    tracing.trace_logger(ListLogger())
    tracing.enable_tracing(False)
    assert tracing.is_tracing() is False
    tracing.enable_tracing(True)
    assert tracing.is_tracing() is True


def test_trace_logger_none_disables_tracing():
    tracing.trace_logger(ListLogger())
    tracing.trace_logger(None)
    assert tracing.is_tracing() is False
    tracing.enable_tracing(True)
    assert tracing.is_tracing() is True


def test_set_logger_replaces_package_logger():
    logger = ListLogger()
    tracing.set_logger(logger)
    assert tracing.get_logger() is logger


def test_set_logger_does_not_change_trace_logger():
    trace_target = ListLogger()
    tracing.trace_logger(trace_target)
    tracing.set_logger(ListLogger())
    assert tracing._current_trace_logger() is trace_target