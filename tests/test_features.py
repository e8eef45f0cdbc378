import copy

import pytest

from seaside.errors import ErrorKind, SeasideError
from seaside.features import (
    AssemblerOptions,
    Dialog,
    Features,
    File,
    Input,
    Message,
    Print,
    Random,
    Read,
    SpecialDirectives,
    Syscalls,
    System,
)
from seaside.flags import BasicPreset

SAMPLE = {
    "kernel_space_accessible": True,
    "self_modifying_code": False,
    "delay_slot": True,
    "show_crash_handler": True,
    "assembler": {"pseudo_instructions": True, "directives": "recommended"},
    "syscalls": {
        "print": "everything",
        "read": "all",
        "file": "full",
        "system": "default",
        "random": "recommended",
        "dialog": "none",
    },
}


def test_recommended_presets_from_source():
    assert SpecialDirectives.recommended() == (
        SpecialDirectives.ASCIIZ | SpecialDirectives.GLOBAL | SpecialDirectives.INCLUDE
    )
    assert System.recommended() == System.EXIT | System.EXIT_2 | System.SLEEP | System.TIME
    assert Input.recommended() == Input(0)
    assert Message.recommended() == Message(0)
    assert Print.recommended() == Print.preset(BasicPreset.EVERYTHING)
    assert Random.recommended() == Random.preset(BasicPreset.EVERYTHING)


def test_directive_keys():
    keys = list(SpecialDirectives.ASCIIZ.to_config())
    assert keys == ["asciiz", "eqv", "global", "include", "macros", "set"]


def test_features_from_sample():
    features = Features.from_config(SAMPLE)
    assert features.delay_slot is True
    assert features.self_modifying_code is False
    assert features.assembler.directives == SpecialDirectives.recommended()
    assert features.syscalls.read == Read.preset(BasicPreset.EVERYTHING)
    assert features.syscalls.file == File.OPEN | File.READ | File.WRITE | File.CLOSE
    assert features.syscalls.system == System.recommended()
    assert features.syscalls.dialog == Dialog.preset(BasicPreset.NOTHING)


def test_features_round_trip():
    features = Features.from_config(SAMPLE)
    assert Features.from_config(features.to_config()) == features


def test_assembler_directive_mapping():
    options = AssemblerOptions.from_config(
        {"pseudo_instructions": False, "directives": {"eqv": True, "macros": True, "set": False}}
    )
    assert options.directives == SpecialDirectives.EQV | SpecialDirectives.MACROS
    assert AssemblerOptions.from_config(options.to_config()) == options


def test_missing_field_raises():
    data = copy.deepcopy(SAMPLE)
    del data["delay_slot"]
    with pytest.raises(SeasideError) as info:
        Features.from_config(data)
    assert info.value.kind is ErrorKind.INVALID_CONFIG


def test_non_bool_field_raises():
    data = copy.deepcopy(SAMPLE)
    data["assembler"]["pseudo_instructions"] = "yes"
    with pytest.raises(SeasideError):
        Features.from_config(data)


def test_dialog_presets():
    everything = Dialog.preset(BasicPreset.EVERYTHING)
    assert everything.input == Input.preset(BasicPreset.EVERYTHING)
    assert everything.message == Message.preset(BasicPreset.EVERYTHING)
    assert Dialog.preset(BasicPreset.RECOMMENDED) == Dialog.preset(BasicPreset.NOTHING)
    assert Dialog.from_config("default") == Dialog.preset(BasicPreset.NOTHING)


def test_dialog_mapping_and_round_trip():
    dialog = Dialog.from_config({"input": {"confirm": True}, "message": "all"})
    assert dialog.input == Input.CONFIRM
    assert dialog.message == Message.preset(BasicPreset.EVERYTHING)
    assert Dialog.from_config(dialog.to_config()) == dialog


def test_dialog_mapping_missing_field():
    with pytest.raises(SeasideError):
        Dialog.from_config({"input": "all"})


def test_validate_requires_exit():
    data = copy.deepcopy(SAMPLE)
    data["syscalls"]["system"] = "nothing"
    features = Features.from_config(data)
    with pytest.raises(SeasideError) as info:
        features.validate()
    assert info.value.kind is ErrorKind.INVALID_CONFIG
    assert str(info.value) == "missing a syscall to exit program"


@pytest.mark.parametrize("key", ["exit", "exit_2", "exit2"])
def test_validate_accepts_either_exit(key):
    data = copy.deepcopy(SAMPLE)
    data["syscalls"]["system"] = {key: True, "midi_sync": True}
    syscalls = Syscalls.from_config(data["syscalls"])
    assert syscalls.system & System.MIDI_SYNC == System.MIDI_SYNC
    syscalls.validate()
    assert syscalls.system & (System.EXIT | System.EXIT_2)


def test_syscalls_round_trip():
    syscalls = Syscalls.from_config(SAMPLE["syscalls"])
    assert Syscalls.from_config(syscalls.to_config()) == syscalls