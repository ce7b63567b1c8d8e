# owstat/scraper/achievements.py
"""
Achievement categories and the achieved / non-achieved card classifier.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

from owstat.models import Achievement, AchievementCategory
from .correlate import correlate
from .query import DocumentQuery

logger = logging.getLogger(__name__)

# Class marker carried by cards the player has not unlocked
DISABLED_MARKER = "m-disabled"

CATEGORY_LABELS = "#achievements-section select > option"
CATEGORY_BLOCK = '#achievements-section div[data-group-id="achievements"]:nth-of-type({index})'


class AchievementState(Enum):
    ACHIEVED = "achieved"
    NON_ACHIEVED = "non_achieved"


def classify_card(class_attr: str) -> AchievementState:
    """Classify an achievement card by its class attribute string."""
    if DISABLED_MARKER in (class_attr or ""):
        return AchievementState.NON_ACHIEVED
    return AchievementState.ACHIEVED


class AchievementAssembler:
    """Builds one AchievementCategory per category label on the page."""

    def __init__(self, query: DocumentQuery):
        self.query = query

    def assemble(self) -> List[AchievementCategory]:
        labels = self.query.strings(CATEGORY_LABELS, required=False)
        categories = [self.category(index, label) for index, label in enumerate(labels, start=1)]
        logger.debug("achievements: %d categories", len(categories))
        return categories

    def category(self, index: int, name: str) -> AchievementCategory:
        block = CATEGORY_BLOCK.format(index=index)
        images = self.query.attrs(f"{block} > ul div.achievement-card > img", "src", required=False)
        titles = self.query.strings(f"{block} div.tooltip-tip > h6", required=False)
        descriptions = self.query.strings(f"{block} div.tooltip-tip > p", required=False)
        classes = self.query.attrs(f"{block} > ul div.achievement-card", "class", required=False)

        achieved = []
        non_achieved = []
        rows = correlate(images, titles, descriptions, classes, context=f"achievements '{name}'")
        for image, title, description, class_attr in rows:
            achievement = Achievement(title=title, description=description, image_url=image)
            if classify_card(class_attr) is AchievementState.NON_ACHIEVED:
                non_achieved.append(achievement)
            else:
                achieved.append(achievement)

        return AchievementCategory(
            name=name,
            achieved=tuple(achieved),
            non_achieved=tuple(non_achieved),
        )
