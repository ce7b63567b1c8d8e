# owstat/models.py
"""
Record types for an extracted career profile.

Every record is built once during a single extraction pass and never mutated.
Mapping fields are exposed as read-only views and left out of hashing.
Ownership is strictly hierarchical: a Profile owns its PlayStats, which own
their Heroes and CareerStats.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import EncodeError, ParseError


def _frozen_mapping(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Hero:
    name: str
    image_url: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "image_url": self.image_url, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hero":
        return cls(name=data["name"], image_url=data["image_url"], value=data["value"])


@dataclass(frozen=True)
class CareerStatCategory:
    name: str
    values: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "values", _frozen_mapping(self.values))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "values": dict(self.values)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerStatCategory":
        return cls(name=data["name"], values=dict(data.get("values") or {}))


@dataclass(frozen=True)
class CareerStat:
    hero_name: str
    categories: Tuple[CareerStatCategory, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hero_name": self.hero_name,
            "categories": [c.to_dict() for c in self.categories],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerStat":
        return cls(
            hero_name=data["hero_name"],
            categories=tuple(CareerStatCategory.from_dict(c) for c in data.get("categories") or []),
        )


@dataclass(frozen=True)
class PlayStat:
    """Stats for one play mode: featured stats, top heroes and career stats."""

    featured_stats: Mapping[str, str] = field(default_factory=dict, hash=False)
    top_heroes: Mapping[str, Tuple[Hero, ...]] = field(default_factory=dict, hash=False)
    career_stats: Tuple[CareerStat, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "featured_stats", _frozen_mapping(self.featured_stats))
        object.__setattr__(self, "top_heroes", _frozen_mapping(self.top_heroes))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "featured_stats": dict(self.featured_stats),
            "top_heroes": {
                label: [h.to_dict() for h in heroes]
                for label, heroes in self.top_heroes.items()
            },
            "career_stats": [c.to_dict() for c in self.career_stats],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayStat":
        return cls(
            featured_stats=dict(data.get("featured_stats") or {}),
            top_heroes={
                label: tuple(Hero.from_dict(h) for h in heroes)
                for label, heroes in (data.get("top_heroes") or {}).items()
            },
            career_stats=tuple(CareerStat.from_dict(c) for c in data.get("career_stats") or []),
        )


@dataclass(frozen=True)
class Achievement:
    title: str
    description: str
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Achievement":
        return cls(
            title=data["title"],
            description=data["description"],
            image_url=data["image_url"],
        )


@dataclass(frozen=True)
class AchievementCategory:
    name: str
    achieved: Tuple[Achievement, ...] = ()
    non_achieved: Tuple[Achievement, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "achieved": [a.to_dict() for a in self.achieved],
            "non_achieved": [a.to_dict() for a in self.non_achieved],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AchievementCategory":
        return cls(
            name=data["name"],
            achieved=tuple(Achievement.from_dict(a) for a in data.get("achieved") or []),
            non_achieved=tuple(Achievement.from_dict(a) for a in data.get("non_achieved") or []),
        )


@dataclass(frozen=True)
class Profile:
    """
    A player's career profile.

    ``competitive_play`` is set if and only if ``competitive_rank`` is set.
    """

    name: str
    battletag: str
    platform: str
    region: str
    profile_image_url: str
    level: int
    level_image_url: str
    level_star_image_url: str = ""
    detail: str = ""
    competitive_rank: Optional[int] = None
    competitive_rank_image_url: str = ""
    quick_play: PlayStat = field(default_factory=PlayStat)
    competitive_play: Optional[PlayStat] = None
    achievements: Tuple[AchievementCategory, ...] = ()

    def __post_init__(self):
        if (self.competitive_rank is None) != (self.competitive_play is None):
            raise ValueError("competitive_play must be present exactly when competitive_rank is")

    @property
    def has_competitive_rank(self) -> bool:
        return self.competitive_rank is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "battletag": self.battletag,
            "platform": self.platform,
            "region": self.region,
            "profile_image_url": self.profile_image_url,
            "level": self.level,
            "level_image_url": self.level_image_url,
            "level_star_image_url": self.level_star_image_url,
            "competitive_rank": self.competitive_rank,
            "competitive_rank_image_url": self.competitive_rank_image_url,
            "detail": self.detail,
            "quick_play": self.quick_play.to_dict(),
            "competitive_play": self.competitive_play.to_dict() if self.competitive_play else None,
            "achievements": [a.to_dict() for a in self.achievements],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        competitive = data.get("competitive_play")
        return cls(
            name=data["name"],
            battletag=data["battletag"],
            platform=data["platform"],
            region=data["region"],
            profile_image_url=data["profile_image_url"],
            level=int(data["level"]),
            level_image_url=data.get("level_image_url", ""),
            level_star_image_url=data.get("level_star_image_url", ""),
            detail=data.get("detail", ""),
            competitive_rank=data.get("competitive_rank"),
            competitive_rank_image_url=data.get("competitive_rank_image_url", ""),
            quick_play=PlayStat.from_dict(data.get("quick_play") or {}),
            competitive_play=PlayStat.from_dict(competitive) if competitive is not None else None,
            achievements=tuple(AchievementCategory.from_dict(a) for a in data.get("achievements") or []),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        try:
            return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise EncodeError(f"JSON encode error: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "Profile":
        try:
            return cls.from_dict(json.loads(text))
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"JSON decode error: {e}") from e
