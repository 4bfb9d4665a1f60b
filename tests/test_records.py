import pytest

from falconkeys.commontypes import SchemaViolation
from falconkeys.records import KeyRecord, LineKind, classify_line, parse_record


@pytest.mark.parametrize(
    "line,expected",
    (
        ("", LineKind.BLANK),
        ("\n", LineKind.BLANK),
        ("   \t  \n", LineKind.BLANK),
        ("#", LineKind.COMMENT),
        ("# AFBrakesToggle 0 0 48 0 65535 0", LineKind.COMMENT),
        ("   #indented comment", LineKind.COMMENT),
        ('SimDoNothing -1 0 0XFFFFFFFF 0 0 0 -1 "header"', LineKind.NO_OP),
        ("SimDoNothing", LineKind.NO_OP),
        ("AFBrakesToggle 0 0 48 0 65535 0", LineKind.BINDING),
        ("SimTriggerFirstDetent 1 -1 -2 0 0x0 0 1", LineKind.OTHER),
        ("SimCATToggle 0 -2 0XFFFFFFFF 0 0 0 1", LineKind.OTHER),
        ("SimCATToggle 0 1", LineKind.OTHER),
    ),
)
def test_classify_line(line: str, expected: LineKind):
    assert classify_line(line) is expected


def test_no_op_must_be_whole_token():
    # only the exact name is a no-op; anything longer is an ordinary callback
    assert classify_line("SimDoNothingElse 0 0 48 0 65535 0") is LineKind.BINDING


@pytest.mark.parametrize(
    "line",
    (
        "",
        "# comment",
        'SimDoNothing -1 0 0XFFFFFFFF 0 0 0 -1 "header"',
        "SimTriggerFirstDetent 1 -1 -2 0 0x0 0 1",
        # other record kinds are skipped without looking at the rest of the line
        "SimCATToggle 0 -2",
    ),
)
def test_parse_record_skips(line: str):
    assert parse_record(1, line) is None


def test_parse_record():
    record = parse_record(7, 'SimPilotToggle 0 0 0X19 0 0X2E 4 1 "Autopilot - Toggle"\n')
    assert record == KeyRecord(
        line_number=7,
        name="SimPilotToggle",
        key_code=0x19,
        modifier_mask=0,
        combo_key_code=0x2E,
        combo_modifier_mask=4,
    )


def test_parse_record_decimal_fields():
    record = parse_record(1, "AFElevatorUp 0 0 200 3 65535 0")
    assert record.key_code == 200
    assert record.modifier_mask == 3
    assert record.combo_key_code == 0xFFFF
    assert record.combo_modifier_mask == 0


@pytest.mark.parametrize(
    "line,token",
    (
        ("AFBrakesToggle", None),
        ("AFBrakesToggle 0", None),
        ("AFBrakesToggle 0 0 48 0", None),
        ("AFBrakesToggle 0 zero 48 0 65535 0", "zero"),
        ("AFBrakesToggle 0 0 B 0 65535 0", "B"),
        ("AFBrakesToggle 0 0 48 shift 65535 0", "shift"),
        ("AFBrakesToggle 0 0 48 0 70000 0", "70000"),
        ("AFBrakesToggle 0 0 48 0 65535 0x", "0x"),
    ),
)
def test_parse_record_schema_violation(line: str, token):
    with pytest.raises(SchemaViolation) as excinfo:
        parse_record(12, line)
    violation = excinfo.value
    assert violation.line_number == 12
    assert violation.token == token
    assert str(violation).startswith("Line 12: ")
