from dataclasses import dataclass, field
from typing import List, Optional, Tuple


DEFAULT_TEAM_EFFECTS: Tuple[int, ...] = (12, 41, 65, 0)
DEFAULT_HOLIDAY_EFFECTS: Tuple[int, ...] = (0,)


@dataclass(frozen=True)
class EntityColor:
    name: str
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> List[int]:
        return [self.r, self.g, self.b]


@dataclass(frozen=True)
class Entity:
    """
    Canonical catalog record for a team or a holiday/event.

    Identity is ``id``; every other field is descriptive.
    """
    id: str
    official_name: str
    city: str
    category: str
    aliases: Tuple[str, ...] = ()
    colors: Tuple[EntityColor, ...] = ()
    kind: str = "team"
    country: Optional[str] = None
    suggested_effects: Tuple[int, ...] = field(default=DEFAULT_TEAM_EFFECTS)
    default_speed: int = 85
    default_intensity: int = 180

    @property
    def team_name(self) -> str:
        """Official name with a leading city stripped ("Kansas City Chiefs" -> "Chiefs")."""
        return extract_team_name(self.official_name, self.city)


@dataclass(frozen=True)
class UserContext:
    """Caller-supplied personalization: saved teams and whereabouts."""
    user_teams: Tuple[str, ...] = ()
    user_lat: Optional[float] = None
    user_lon: Optional[float] = None
    user_location: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.user_lat is not None and self.user_lon is not None


def extract_team_name(official_name: str, city: str) -> str:
    if city and official_name.lower().startswith(city.lower()):
        remainder = official_name[len(city):].strip()
        if remainder:
            return remainder
    return official_name
