"""Factory helpers for creating the character selector entities."""
from esper import World

from character_creator.constants import (
    SELECTOR_ACTION_BUTTON_WIDTH,
    SELECTOR_BUTTON_GAP,
    SELECTOR_BUTTON_HEIGHT,
    SELECTOR_BUTTON_WIDTH,
    SELECTOR_LABEL_WIDTH,
    SELECTOR_ROW_HEIGHT,
)
from character_creator.selector.components import (
    SelectorAction,
    SelectorButton,
    SelectorRow,
    SelectorTag,
    SelectorTargetKind,
)

SELECTOR_ROWS: tuple[tuple[str, SelectorTargetKind, str], ...] = (
    ("Skin Tone", "colour", "skin"),
    ("Hair", "part", "hair"),
    ("Hair Colour", "colour", "hair"),
    ("Eyes", "part", "eyes"),
    ("Mouth", "part", "mouth"),
    ("Shirt Colour", "colour", "top"),
    ("Shorts Colour", "colour", "bottom"),
)


def spawn_character_selector(world: World, width: int, height: int) -> None:
    """Create one Prev/Next row per editable slot plus the Randomize and Reset buttons.

    The panel sits in the right half of the window, rows stacked top to bottom
    around the vertical centre.
    """
    panel_width = SELECTOR_LABEL_WIDTH + 2 * SELECTOR_BUTTON_WIDTH + 2 * SELECTOR_BUTTON_GAP
    left = width * 0.75 - panel_width / 2
    total_rows = len(SELECTOR_ROWS) + 1
    top_y = height / 2 + (total_rows - 1) * SELECTOR_ROW_HEIGHT / 2

    prev_x = left + SELECTOR_LABEL_WIDTH + SELECTOR_BUTTON_GAP + SELECTOR_BUTTON_WIDTH / 2
    next_x = prev_x + SELECTOR_BUTTON_WIDTH + SELECTOR_BUTTON_GAP

    for index, (label, kind, target) in enumerate(SELECTOR_ROWS):
        y_position = top_y - index * SELECTOR_ROW_HEIGHT
        row_entity = world.create_entity()
        world.add_component(row_entity, SelectorRow(label=label, target_kind=kind, target=target, x=left, y=y_position))
        world.add_component(row_entity, SelectorTag())
        for button_label, action, x_position in (("<", SelectorAction.PREV, prev_x), (">", SelectorAction.NEXT, next_x)):
            button_entity = world.create_entity()
            world.add_component(
                button_entity,
                SelectorButton(
                    label=button_label,
                    action=action,
                    target_kind=kind,
                    target=target,
                    x=x_position,
                    y=y_position,
                    width=SELECTOR_BUTTON_WIDTH,
                    height=SELECTOR_BUTTON_HEIGHT,
                ),
            )
            world.add_component(button_entity, SelectorTag())

    actions_y = top_y - len(SELECTOR_ROWS) * SELECTOR_ROW_HEIGHT
    center_x = left + panel_width / 2
    offset = (SELECTOR_ACTION_BUTTON_WIDTH + SELECTOR_BUTTON_GAP) / 2
    action_specs = (
        ("Randomize", SelectorAction.RANDOMIZE, center_x - offset),
        ("Reset", SelectorAction.RESET, center_x + offset),
    )
    for label, action, x_position in action_specs:
        button_entity = world.create_entity()
        world.add_component(
            button_entity,
            SelectorButton(
                label=label,
                action=action,
                target_kind="config",
                target="all",
                x=x_position,
                y=actions_y,
                width=SELECTOR_ACTION_BUTTON_WIDTH,
                height=SELECTOR_BUTTON_HEIGHT,
            ),
        )
        world.add_component(button_entity, SelectorTag())


def clear_character_selector(world: World) -> None:
    """Remove all entities that are part of the selector UI."""
    to_delete = {ent for ent, _ in world.get_component(SelectorTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
