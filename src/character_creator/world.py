import random

from esper import World

from character_creator.assets.character_assets import CharacterAssets
from character_creator.components.character_session import CharacterSession
from character_creator.events.bus import EventBus
from character_creator.state.config_store import CharacterConfigStore
from character_creator.state.storage import KeyValueStorage, MemoryStorage, storage_capabilities


def create_world(
    event_bus: EventBus,
    assets: CharacterAssets,
    *,
    storage: KeyValueStorage | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    load, save = storage_capabilities(storage if storage is not None else MemoryStorage())
    store = CharacterConfigStore(
        assets.available_part_ids(),
        load=load,
        save=save,
        event_bus=event_bus,
        rng=getattr(world, "random"),
    )
    world.create_entity(CharacterSession(store=store, assets=assets))
    return world


def get_session(world: World) -> CharacterSession:
    for _, session in world.get_component(CharacterSession):
        return session
    raise RuntimeError("CharacterSession not found; build the world with create_world()")


def get_config_store(world: World) -> CharacterConfigStore:
    return get_session(world).store
