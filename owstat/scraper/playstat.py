# owstat/scraper/playstat.py
"""
Play-mode stats: featured stats, top heroes and per-hero career stats.

The same assembly runs for quick play and competitive play; only the
element id scoping every selector differs.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from owstat.config import PlayMode
from owstat.errors import SelectorNotFound
from owstat.models import CareerStat, CareerStatCategory, Hero, PlayStat
from .correlate import correlate, correlate_mapping
from .query import DocumentQuery, quote_attr

logger = logging.getLogger(__name__)

# Selector templates, formatted with the play-mode element id
FEATURED_TITLES = "#{mode} > section.highlights-section div.card-content > p"
FEATURED_VALUES = "#{mode} > section.highlights-section div.card-content > h3"

COMPARISON_LABELS = (
    '#{mode} > section.hero-comparison-section select[data-group-id="comparisons"] > option'
)
COMPARISON_BLOCK = (
    "#{mode} > section.hero-comparison-section div.progress-category:nth-of-type({index})"
)

STAT_GROUPS = '#{mode} div[data-group-id="stats"]'
STAT_GROUP_HERO = "#{mode} option[value={group}]"
STAT_CATEGORY_TITLES = (
    "#{mode} div[data-category-id={group}] div.card-stat-block"
    " > table.data-table > thead > tr > th > span.stat-title"
)
STAT_CATEGORY_COLUMN = (
    "#{mode} div[data-category-id={group}] > div:nth-child({index})"
    " > div.card-stat-block > table.data-table > tbody > tr > td:nth-child({column})"
)


class PlayStatAssembler:
    """Builds the PlayStat of one play mode from a parsed career page."""

    def __init__(self, query: DocumentQuery, mode: PlayMode):
        self.query = query
        self.mode = PlayMode(mode)

    def assemble(self) -> PlayStat:
        featured = self.featured_stats()
        heroes = self.top_heroes()
        careers = self.career_stats()
        logger.debug(
            "%s: %d featured stats, %d comparisons, %d career stat groups",
            self.mode.value, len(featured), len(heroes), len(careers),
        )
        return PlayStat(featured_stats=featured, top_heroes=heroes, career_stats=careers)

    def _sel(self, template: str, **kwargs) -> str:
        return template.format(mode=self.mode.value, **kwargs)

    # --- Featured stats ---

    def featured_stats(self) -> Dict[str, str]:
        titles = self.query.strings(self._sel(FEATURED_TITLES), required=False)
        values = self.query.strings(self._sel(FEATURED_VALUES), required=False)
        return correlate_mapping(titles, values, context=f"{self.mode.value} featured stats")

    # --- Top heroes ---

    def top_heroes(self) -> Dict[str, Tuple[Hero, ...]]:
        labels = self.query.strings(self._sel(COMPARISON_LABELS), required=False)

        top_heroes: Dict[str, Tuple[Hero, ...]] = {}
        for index, label in enumerate(labels, start=1):
            block = self._sel(COMPARISON_BLOCK, index=index)
            names = self.query.strings(f"{block} div.bar-text > div.title", required=False)
            images = self.query.attrs(f"{block} img", "src", required=False)
            values = self.query.strings(f"{block} div.bar-text > div.description", required=False)

            rows = correlate(names, images, values, context=f"{self.mode.value} top heroes '{label}'")
            top_heroes[label] = tuple(
                Hero(name=name, image_url=image, value=value) for name, image, value in rows
            )
        return top_heroes

    # --- Career stats ---

    def stat_group_ids(self) -> List[str]:
        """
        Distinct career stat group ids of this mode, in document order.

        Raises:
            SelectorNotFound: If a stat group carries no data-category-id
        """
        selector = self._sel(STAT_GROUPS)
        ids = self.query.attrs(selector, "data-category-id", required=False)
        seen = set()
        unique = []
        for group_id in ids:
            if not group_id:
                raise SelectorNotFound(selector, "data-category-id")
            if group_id not in seen:
                seen.add(group_id)
                unique.append(group_id)
        return unique

    def career_stats(self) -> Tuple[CareerStat, ...]:
        return tuple(self.career_stat(group_id) for group_id in self.stat_group_ids())

    def career_stat(self, group_id: str) -> CareerStat:
        group = quote_attr(group_id)
        hero_name = self.query.scalar(self._sel(STAT_GROUP_HERO, group=group))
        titles = self.query.strings(self._sel(STAT_CATEGORY_TITLES, group=group), required=False)

        categories = []
        for index, title in enumerate(titles, start=1):
            names = self.query.strings(
                self._sel(STAT_CATEGORY_COLUMN, group=group, index=index, column=1),
                required=False,
            )
            values = self.query.strings(
                self._sel(STAT_CATEGORY_COLUMN, group=group, index=index, column=2),
                required=False,
            )
            categories.append(CareerStatCategory(
                name=title,
                values=correlate_mapping(
                    names, values,
                    context=f"{self.mode.value} career stats '{hero_name}' / '{title}'",
                ),
            ))

        return CareerStat(hero_name=hero_name, categories=tuple(categories))
