import logging

import pytest

from restwire import tracing
from restwire.response import RecordingWriter, Response


def _response(writer, accept="*/*", produces=("*/*",)):
    return Response(writer, request_accept=accept, route_produces=list(produces), pretty_print=True)


class FailingWriter(RecordingWriter):
    def write(self, data):
        raise OSError("fail")


class NoFlushWriter:
    def __init__(self):
        self.headers = {}
        self.code = None

    def write_header(self, status):
        self.code = status

    def write(self, data):
        return len(data)


def test_write_header_is_remembered():
    resp = _response(RecordingWriter())
    resp.write_header(123)
    assert resp.status_code() == 123


def test_status_defaults_to_ok():
    resp = _response(RecordingWriter())
    assert resp.status_code() == 200


def test_content_length_of_error_string():
    resp = _response(RecordingWriter())
    resp.write_error_string(404, "Invalid")
    assert resp.content_length() == len("Invalid")


@pytest.mark.parametrize("status", [204, 304, 200, 400])
def test_status_is_passed_to_writer(status):
    writer = RecordingWriter()
    resp = _response(writer)
    resp.write_header(status)
    assert writer.code == status


def test_write_header_no_content():
    writer = RecordingWriter()
    resp = _response(writer, "text/plain", ["text/plain"])
    resp.write_header(204)
    assert writer.code == 204


def test_write_header_not_modified():
    writer = RecordingWriter()
    resp = _response(writer, "application/json", ["application/json"])
    resp.write_header(304)
    assert writer.code == 304


def test_write_error_with_none():
    writer = RecordingWriter()
    resp = Response(writer)
    resp.write_error(410, None)
    assert writer.code == 410
    assert bytes(writer.body) == b""
    assert str(resp.error()) == ""


def test_write_error_keeps_error_and_writes_text():
    writer = RecordingWriter()
    resp = Response(writer)
    err = ValueError("bad input")
    resp.write_error(400, err)
    assert resp.error() is err
    assert writer.code == 400
    assert bytes(writer.body) == b"bad input"


def test_write_error_string_records_error():
    writer = RecordingWriter()
    resp = Response(writer)
    resp.write_error_string(503, "busy")
    assert str(resp.error()) == "busy"
    assert writer.code == 503
    assert bytes(writer.body) == b"busy"


def test_failed_write_raises():
    resp = _response(FailingWriter(), "application/json", ["application/json"])
    with pytest.raises(OSError, match="fail"):
        resp.write_error_string(500, "oops")
    assert resp.content_length() == 0


def test_write_counts_bytes():
    writer = RecordingWriter()
    resp = Response(writer)
    assert resp.write(b"abc") == 3
    assert resp.write(b"de") == 2
    assert resp.content_length() == 5
    assert bytes(writer.body) == b"abcde"
    assert writer.code == 200


def test_internal_server_error():
    writer = RecordingWriter()
    resp = Response(writer)
    assert resp.internal_server_error() is resp
    assert writer.code == 500
    assert resp.status_code() == 500


def test_add_header_accumulates_with_canonical_name():
    writer = RecordingWriter()
    resp = Response(writer)
    resp.add_header("allow", "GET").add_header("Allow", "POST")
    assert writer.headers == {"Allow": ["GET", "POST"]}


def test_set_request_accepts():
    resp = Response(RecordingWriter())
    resp.set_request_accepts("application/xml")
    assert resp.request_accept == "application/xml"


def test_flush_reaches_writer():
    writer = RecordingWriter()
    Response(writer).flush()
    assert writer.flushed is True
    assert writer.code == 200


def test_flush_without_support_traces(caplog):
    logger = logging.getLogger("restwire.test.response")
    tracing.trace_logger(logger)
    try:
        with caplog.at_level(logging.INFO, logger="restwire.test.response"):
            Response(NoFlushWriter()).flush()
    finally:
        tracing.trace_logger(None)
    assert any("doesn't support Flush" in record.getMessage() for record in caplog.records)


def test_recording_writer_keeps_first_status():
    writer = RecordingWriter()
    writer.write_header(201)
    writer.write_header(404)
    assert writer.code == 201


def test_recording_writer_rejects_invalid_status():
    with pytest.raises(ValueError):
        RecordingWriter().write_header(42)


def test_pretty_print_defaults_on():
    assert Response(RecordingWriter()).pretty_print is True
    assert Response(RecordingWriter(), pretty_print=False).pretty_print is False