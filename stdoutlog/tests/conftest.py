"""Shared fixtures for stdoutlog tests."""

import pytest
from opentelemetry._logs import SeverityNumber
from opentelemetry.trace import TraceFlags

from stdoutlog.logs import KeyValue, LogRecord
from stdoutlog.utils import parse_span_id, parse_trace_id

# 2023-11-14T22:13:20.123456789Z
NOW_NS = 1_700_000_000_123_456_789
NOW_TEXT = "2023-11-14T22:13:20.123456789Z"
ZERO_TEXT = "1970-01-01T00:00:00Z"


def make_record(timestamp_ns: int = NOW_NS, **overrides) -> LogRecord:
    fields = dict(
        timestamp=timestamp_ns,
        observed_timestamp=timestamp_ns,
        severity_number=SeverityNumber.INFO,
        severity_text="INFO",
        body="test",
        attributes=[
            # More than five attributes
            KeyValue("key", "value"),
            KeyValue("key2", "value"),
            KeyValue("key3", "value"),
            KeyValue("key4", "value"),
            KeyValue("key5", "value"),
            KeyValue("bool", True),
        ],
        trace_id=parse_trace_id("0102030405060708090a0b0c0d0e0f10"),
        span_id=parse_span_id("0102030405060708"),
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )
    fields.update(overrides)
    return LogRecord(**fields)


def expected_json(timestamp: str) -> str:
    return (
        '{"Timestamp":"' + timestamp + '","ObservedTimestamp":"' + timestamp + '",'
        '"Severity":9,"SeverityText":"INFO","Body":{},'
        '"Attributes":[{"Key":"key","Value":{}},{"Key":"key2","Value":{}},'
        '{"Key":"key3","Value":{}},{"Key":"key4","Value":{}},'
        '{"Key":"key5","Value":{}},{"Key":"bool","Value":{}}],'
        '"TraceID":"0102030405060708090a0b0c0d0e0f10","SpanID":"0102030405060708",'
        '"TraceFlags":"01","Resource":{},"Scope":{"Name":"","Version":"","SchemaURL":""},'
        '"AttributeValueLengthLimit":0,"AttributeCountLimit":0}\n'
    )


def expected_pretty_json(timestamp: str) -> str:
    return (
        '{\n'
        '\t"Timestamp": "' + timestamp + '",\n'
        '\t"ObservedTimestamp": "' + timestamp + '",\n'
        '\t"Severity": 9,\n'
        '\t"SeverityText": "INFO",\n'
        '\t"Body": {},\n'
        '\t"Attributes": [\n'
        '\t\t{\n\t\t\t"Key": "key",\n\t\t\t"Value": {}\n\t\t},\n'
        '\t\t{\n\t\t\t"Key": "key2",\n\t\t\t"Value": {}\n\t\t},\n'
        '\t\t{\n\t\t\t"Key": "key3",\n\t\t\t"Value": {}\n\t\t},\n'
        '\t\t{\n\t\t\t"Key": "key4",\n\t\t\t"Value": {}\n\t\t},\n'
        '\t\t{\n\t\t\t"Key": "key5",\n\t\t\t"Value": {}\n\t\t},\n'
        '\t\t{\n\t\t\t"Key": "bool",\n\t\t\t"Value": {}\n\t\t}\n'
        '\t],\n'
        '\t"TraceID": "0102030405060708090a0b0c0d0e0f10",\n'
        '\t"SpanID": "0102030405060708",\n'
        '\t"TraceFlags": "01",\n'
        '\t"Resource": {},\n'
        '\t"Scope": {\n'
        '\t\t"Name": "",\n'
        '\t\t"Version": "",\n'
        '\t\t"SchemaURL": ""\n'
        '\t},\n'
        '\t"AttributeValueLengthLimit": 0,\n'
        '\t"AttributeCountLimit": 0\n'
        '}\n'
    )


@pytest.fixture
def record() -> LogRecord:
    return make_record()
