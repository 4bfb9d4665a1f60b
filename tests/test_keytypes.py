import pytest

from falconkeys.keycodes import Key
from falconkeys.keytypes import Callback, Modifier, decode_modifiers, format_binding


@pytest.mark.parametrize(
    "mask,expected",
    (
        (0, ()),
        (1, (Modifier.LSHIFT,)),
        (2, (Modifier.LCONTROL,)),
        (3, (Modifier.LSHIFT, Modifier.LCONTROL)),
        (4, (Modifier.LALT,)),
        (5, (Modifier.LSHIFT, Modifier.LALT)),
        (6, (Modifier.LCONTROL, Modifier.LALT)),
        (7, (Modifier.LSHIFT, Modifier.LCONTROL, Modifier.LALT)),
        # higher bits are ignored
        (8, ()),
        (0xFFFF, (Modifier.LSHIFT, Modifier.LCONTROL, Modifier.LALT)),
    ),
)
def test_decode_modifiers(mask: int, expected: tuple[Modifier, ...]):
    assert decode_modifiers(mask) == expected


def test_format_binding():
    assert format_binding(Key.UpArrow, (Modifier.LSHIFT, Modifier.LCONTROL)) == "LSHIFT+LCONTROL+UpArrow"
    assert format_binding(Key.B, ()) == "B"


def make_callback(**overrides):
    fields = dict(
        name="SimPilotToggle",
        key_code=0x19,
        readable_key_code=Key.P,
        modifiers=(),
        combo_key_code=0x2E,
        readable_combo_key_code=Key.C,
        combo_modifiers=(Modifier.LALT,),
    )
    fields.update(overrides)
    return Callback(**fields)


def test_callback_bindings():
    callback = make_callback()
    assert callback.binding == "P"
    assert callback.combo_binding == "LALT+C"


def test_callback_without_combo():
    callback = make_callback(combo_key_code=0xFFFF, readable_combo_key_code=Key.Unknown, combo_modifiers=())
    assert callback.combo_binding is None


def test_callback_is_frozen():
    callback = make_callback()
    with pytest.raises(AttributeError):
        callback.name = "Other"
