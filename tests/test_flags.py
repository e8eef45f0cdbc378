import pytest

from seaside.errors import ErrorKind, SeasideError
from seaside.flags import BasicPreset, PresetFlag

_COLOUR_MEMBERS = {"RED": 1, "GREEN": 2, "LIGHT_BLUE": 4}


class Colour(PresetFlag):
    RED = 1
    GREEN = 2
    LIGHT_BLUE = 4

    @classmethod
    def recommended(cls):
        return cls.RED


@pytest.mark.parametrize(
    "name, expected",
    [
        ("everything", BasicPreset.EVERYTHING),
        ("all", BasicPreset.EVERYTHING),
        ("full", BasicPreset.EVERYTHING),
        ("nothing", BasicPreset.NOTHING),
        ("none", BasicPreset.NOTHING),
        ("empty", BasicPreset.NOTHING),
        ("recommended", BasicPreset.RECOMMENDED),
        ("default", BasicPreset.RECOMMENDED),
    ],
)
def test_preset_aliases(name, expected):
    assert BasicPreset.parse(name) is expected


def test_invalid_preset_raises():
    with pytest.raises(SeasideError) as info:
        BasicPreset.parse("Everything")
    assert info.value.kind is ErrorKind.INVALID_CONFIG


def test_presets():
    assert Colour.preset(BasicPreset.parse("everything")) == (
        Colour.RED | Colour.GREEN | Colour.LIGHT_BLUE
    )
    assert Colour.preset(BasicPreset.parse("nothing")) == Colour(0)
    assert Colour.preset(BasicPreset.parse("recommended")) == Colour.RED


def test_default_recommended_is_everything():
    plain = PresetFlag("Plain", {"ONE": 1, "EXIT_2": 2})
    assert plain.recommended() == plain.ONE | plain.EXIT_2
    assert plain.recommended() == plain.preset(BasicPreset.EVERYTHING)


def test_from_mapping_snake_and_pascal_keys():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    assert colour.from_mapping({"light_blue": True, "red": False}) == colour.LIGHT_BLUE
    assert colour.from_mapping({"LightBlue": True, "green": True}) == (
        colour.LIGHT_BLUE | colour.GREEN
    )


def test_from_mapping_ignores_unknown_and_unsplittable_keys():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    assert colour.from_mapping({"lightblue": True, "purple": True}) == colour(0)


def test_from_mapping_digit_keys():
    plain = PresetFlag("Plain", {"ONE": 1, "EXIT_2": 2})
    assert plain.from_mapping({"exit2": True}) == plain.EXIT_2
    assert plain.from_mapping({"exit_2": True}) == plain.EXIT_2


def test_from_mapping_rejects_non_bool():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    with pytest.raises(SeasideError) as info:
        colour.from_mapping({"red": 1})
    assert info.value.kind is ErrorKind.INVALID_CONFIG


def test_to_config_lists_every_flag():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    assert colour.GREEN.to_config() == {"red": False, "green": True, "light_blue": False}


@pytest.mark.parametrize("bits", range(8))
def test_round_trip(bits):
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    flags = colour(bits)
    assert colour.from_config(flags.to_config()) == flags


def test_from_config_preset_string():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    assert colour.from_config("all") == colour.RED | colour.GREEN | colour.LIGHT_BLUE
    assert colour.from_config("none") == colour(0)
    assert Colour.from_config("default") == Colour.preset(BasicPreset.parse("recommended"))
    assert Colour.from_config("default") == Colour.RED


def test_from_config_rejects_bad_values():
    colour = PresetFlag("Colour", _COLOUR_MEMBERS)
    with pytest.raises(SeasideError):
        colour.from_config("bogus")
    with pytest.raises(SeasideError) as info:
        colour.from_config(3)
    assert info.value.kind is ErrorKind.INVALID_CONFIG