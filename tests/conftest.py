"""
Shared fixtures: a small in-memory catalog and resolver wiring.
"""
import pytest

from entity_resolver.models import Entity, EntityColor
from entity_resolver.resolution import CatalogSnapshot, create_entity_resolver
from entity_resolver.service import ResolverService

RED = EntityColor("Red", 227, 24, 55)
GOLD = EntityColor("Gold", 255, 184, 28)
BLUE = EntityColor("Blue", 0, 70, 135)
WHITE = EntityColor("White", 255, 255, 255)


def make_team(id, name, city, league, aliases=(), colors=(RED, GOLD)):
    return Entity(
        id=id,
        official_name=name,
        city=city,
        category=league,
        aliases=tuple(aliases),
        colors=tuple(colors),
    )


@pytest.fixture
def entities():
    return [
        make_team("chiefs", "Kansas City Chiefs", "Kansas City", "NFL",
                  aliases=["kansas city", "kc", "kc chiefs", "mahomes"]),
        make_team("royals", "Kansas City Royals", "Kansas City", "MLB",
                  aliases=["kc royals", "royals"], colors=(BLUE, GOLD, WHITE)),
        make_team("seahawks", "Seattle Seahawks", "Seattle", "NFL",
                  aliases=["seattle seahawks", "hawks", "12s"]),
        make_team("kings", "Sacramento Kings", "Sacramento", "NBA",
                  aliases=["sactown"]),
        make_team("kings_nhl", "Los Angeles Kings", "Los Angeles", "NHL",
                  aliases=["la kings"]),
        Entity(
            id="halloween",
            official_name="Halloween",
            city="",
            category="popular",
            aliases=("spooky",),
            colors=(EntityColor("Pumpkin", 255, 117, 24),),
            kind="holiday",
        ),
    ]


@pytest.fixture
def snapshot(entities):
    return CatalogSnapshot.build(entities)


@pytest.fixture
def resolver():
    return create_entity_resolver()


@pytest.fixture
def service(entities):
    return ResolverService(entities)
