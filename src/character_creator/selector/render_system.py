"""Rendering system responsible for drawing the character selector panel."""
from esper import World

from character_creator.components.character import CharacterConfig
from character_creator.selector.components import SelectorButton, SelectorRow
from character_creator.state.palettes import PALETTES
from character_creator.world import get_config_store


def row_value_text(config: CharacterConfig, row: SelectorRow) -> str:
    """Current selection shown beside a row caption."""
    if row.target_kind == "part":
        return config.part(row.target)
    index = config.colour(row.target)
    return f"{index + 1}/{len(PALETTES[row.target])}"


class SelectorRenderSystem:
    """Draws selector rows and buttons."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        import arcade

        self.render(arcade)

    def render(self, arcade_module) -> None:
        config = get_config_store(self.world).config

        for _, row in self.world.get_component(SelectorRow):
            arcade_module.draw_text(row.label, row.x, row.y + 6, arcade_module.color.WHITE, 14, anchor_y="center")
            arcade_module.draw_text(
                row_value_text(config, row),
                row.x,
                row.y - 10,
                arcade_module.color.LIGHT_GRAY,
                10,
                anchor_y="center",
            )

        for _, button in self.world.get_component(SelectorButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            arcade_module.draw_lbwh_rectangle_filled(
                left,
                bottom,
                button.width,
                button.height,
                arcade_module.color.DARK_SLATE_BLUE,
            )
            arcade_module.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                arcade_module.color.WHITE,
                border_width=2,
            )
            arcade_module.draw_text(
                button.label,
                button.x,
                button.y,
                arcade_module.color.WHITE,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
