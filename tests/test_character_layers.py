from character_creator.components.character import CharacterColours, CharacterConfig, CharacterParts
from character_creator.rendering.layers import LayeredLayer, SingleLayer, build_character_layers, pick_by_id
from character_creator.state.palettes import PALETTES

from helpers import layered_option, make_assets


def _config(**parts) -> CharacterConfig:
    values = {"hair": "hair_1_0", "eyes": "eyes1", "mouth": "mouth0", **parts}
    return CharacterConfig(parts=CharacterParts(**values), colours=CharacterColours(skin=2, hair=3, top=1, bottom=4))


def test_layers_are_stacked_back_to_front():
    layers = build_character_layers(_config(), make_assets())

    assert [layer.key for layer in layers] == ["legs", "bottom", "top", "arms", "head", "eyes", "mouth", "hair"]


def test_layer_kinds_and_tints():
    layers = {layer.key: layer for layer in build_character_layers(_config(), make_assets())}

    skin = PALETTES["skin"][2]
    assert layers["legs"].colour == skin
    assert layers["arms"].colour == skin
    assert layers["head"].colour == skin
    assert layers["bottom"].colour == PALETTES["bottom"][4]
    assert layers["top"].colour == PALETTES["top"][1]
    assert layers["hair"].colour == PALETTES["hair"][3]
    assert isinstance(layers["eyes"], SingleLayer)
    assert layers["eyes"].kind == "single"
    assert isinstance(layers["hair"], LayeredLayer)
    assert layers["hair"].kind == "layered"


def test_selected_ids_pick_resources():
    layers = {layer.key: layer for layer in build_character_layers(_config(), make_assets())}

    assert layers["hair"].bg == "hair_1_0_bg"
    assert layers["hair"].outline == "hair_1_0_outline"
    assert layers["eyes"].src == "eyes1.png"
    assert layers["head"].bg == "head_base_0_bg"


def test_stale_ids_fall_back_to_first_option():
    layers = {layer.key: layer for layer in build_character_layers(_config(hair="gone", eyes="gone"), make_assets())}

    assert layers["hair"].bg == "hair_0_0_bg"
    assert layers["eyes"].src == "eyes0.png"


def test_out_of_range_colour_uses_first_palette_entry():
    config = CharacterConfig(
        parts=CharacterParts(hair="hair_0_0", eyes="eyes0", mouth="mouth0"),
        colours=CharacterColours(skin=50),
    )

    layers = build_character_layers(config, make_assets())

    assert layers[0].colour == PALETTES["skin"][0]


def test_empty_catalogs_are_omitted():
    assets = make_assets(mouth=(), with_body=False)

    layers = build_character_layers(_config(), assets)

    assert [layer.key for layer in layers] == ["eyes", "hair"]


def test_pick_by_id_reports_fallbacks():
    options = [layered_option("a"), layered_option("b")]

    assert pick_by_id(options, "b").value.id == "b"
    assert pick_by_id(options, "b").ok

    fallback = pick_by_id(options, "zzz")
    assert fallback.value.id == "a"
    assert not fallback.ok

    empty = pick_by_id([], "a")
    assert empty.value is None
    assert not empty.ok
