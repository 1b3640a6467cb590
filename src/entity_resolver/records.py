"""
Validated record models for catalog and overlay JSON.

Both the bundled catalog and remote overlays use the same camelCase record
shapes; each record is validated independently so one bad entry never
takes the others down with it.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import DEFAULT_HOLIDAY_EFFECTS, DEFAULT_TEAM_EFFECTS, Entity, EntityColor
from .schemas import OverlayRecordFailure

logger = logging.getLogger(__name__)

HOLIDAY_TYPES = ("federal", "popular", "cultural", "season")


class ColorRecord(BaseModel):
    name: str = "Color"
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def to_color(self) -> EntityColor:
        return EntityColor(self.name, self.r, self.g, self.b)


class _EntityRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    aliases: List[str] = Field(default_factory=list)
    colors: List[ColorRecord] = Field(min_length=1, max_length=4)

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("id cannot be blank")
        return value

    @field_validator("aliases")
    @classmethod
    def _lowercase_aliases(cls, value: List[str]) -> List[str]:
        return [a.strip().lower() for a in value if a and a.strip()]


class TeamRecord(_EntityRecord):
    """Sports team as stored in catalog/overlay JSON."""
    official_name: str = Field(alias="officialName", min_length=1)
    city: str = ""
    league: str = ""
    country: Optional[str] = None
    suggested_effects: List[int] = Field(
        default_factory=lambda: list(DEFAULT_TEAM_EFFECTS), alias="suggestedEffects"
    )
    default_speed: int = Field(85, alias="defaultSpeed", ge=0, le=255)
    default_intensity: int = Field(180, alias="defaultIntensity", ge=0, le=255)

    def to_entity(self) -> Entity:
        return Entity(
            id=self.id,
            official_name=self.official_name.strip(),
            city=self.city.strip(),
            category=self.league,
            aliases=tuple(self.aliases),
            colors=tuple(c.to_color() for c in self.colors),
            kind="team",
            country=self.country,
            suggested_effects=tuple(self.suggested_effects),
            default_speed=self.default_speed,
            default_intensity=self.default_intensity,
        )


class HolidayRecord(_EntityRecord):
    """Holiday or event palette. Holidays have no city; the type is the category."""
    name: str = Field(min_length=1)
    type: str = "popular"
    suggested_effects: List[int] = Field(
        default_factory=lambda: list(DEFAULT_HOLIDAY_EFFECTS), alias="suggestedEffects"
    )
    default_speed: int = Field(128, alias="defaultSpeed", ge=0, le=255)
    default_intensity: int = Field(128, alias="defaultIntensity", ge=0, le=255)

    @field_validator("type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        value = value.strip().lower()
        return value if value in HOLIDAY_TYPES else "popular"

    def to_entity(self) -> Entity:
        return Entity(
            id=self.id,
            official_name=self.name.strip(),
            city="",
            category=self.type,
            aliases=tuple(self.aliases),
            colors=tuple(c.to_color() for c in self.colors),
            kind="holiday",
            suggested_effects=tuple(self.suggested_effects),
            default_speed=self.default_speed,
            default_intensity=self.default_intensity,
        )


RecordModel = Union[Type[TeamRecord], Type[HolidayRecord]]


def parse_records(
    raw_records: Any,
    model: RecordModel,
    section: str,
) -> Tuple[List[Entity], List[OverlayRecordFailure]]:
    """
    Validate a list of raw JSON records one at a time.

    :param raw_records: Decoded JSON value expected to be a list of objects
    :param model: TeamRecord or HolidayRecord
    :param section: Section name used in failure reports (e.g. "teams_additions")
    :return: (parsed entities, per-record failures)
    """
    if raw_records is None:
        return [], []

    if not isinstance(raw_records, Sequence) or isinstance(raw_records, (str, bytes)):
        failure = OverlayRecordFailure(section, -1, "section must be a list of records")
        logger.warning(f"Skipping '{section}': {failure.message}")
        return [], [failure]

    entities: List[Entity] = []
    failures: List[OverlayRecordFailure] = []

    for position, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            failures.append(OverlayRecordFailure(section, position, "record must be an object"))
            continue
        try:
            entities.append(model.model_validate(raw).to_entity())
        except ValidationError as e:
            message = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            failures.append(OverlayRecordFailure(section, position, message))

    for failure in failures:
        logger.warning(f"Skipped {section}[{failure.position}]: {failure.message}")

    return entities, failures
