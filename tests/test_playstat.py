# tests/test_playstat.py

import pytest

from owstat.config import PlayMode
from owstat.errors import CorrelationMismatch, SelectorNotFound
from owstat.models import Hero
from owstat.scraper.playstat import PlayStatAssembler
from owstat.scraper.query import DocumentQuery

from tests.helpers import (
    COMPETITIVE_CAREERS,
    COMPETITIVE_COMPARISONS,
    COMPETITIVE_FEATURED,
    QUICK_CAREERS,
    QUICK_COMPARISONS,
    QUICK_FEATURED,
    career_page,
    careers_html,
    comparisons_html,
    featured_html,
    mode_html,
)


def _assembler(page: str, mode: PlayMode = PlayMode.QUICK_PLAY) -> PlayStatAssembler:
    return PlayStatAssembler(DocumentQuery(page), mode)


class TestFeaturedStats:
    """Test featured stat label/value pairing."""

    def test_values_kept_verbatim(self):
        stats = _assembler(career_page()).featured_stats()
        assert stats == {"Eliminations": "1,234", "Deaths": "56"}

    def test_scoped_to_mode(self):
        stats = _assembler(career_page(), PlayMode.COMPETITIVE_PLAY).featured_stats()
        assert stats == dict(COMPETITIVE_FEATURED)

    def test_no_featured_section_is_empty_mapping(self):
        page = career_page(quick_play=mode_html("quick-play", (), QUICK_COMPARISONS, QUICK_CAREERS))
        assert _assembler(page).featured_stats() == {}

    def test_missing_value_raises_mismatch(self):
        section = featured_html(QUICK_FEATURED).replace('<h3 class="card-heading">56</h3>', "", 1)
        page = career_page(quick_play=f'<div id="quick-play">{section}</div>')
        with pytest.raises(CorrelationMismatch):
            _assembler(page).featured_stats()


class TestTopHeroes:
    """Test per-comparison hero lists."""

    def test_heroes_per_comparison_label(self):
        heroes = _assembler(career_page()).top_heroes()

        assert list(heroes) == ["Time Played", "Games Won"]
        assert heroes["Time Played"] == (
            Hero("Reinhardt", "https://img/reinhardt.png", "12 hours"),
            Hero("Mercy", "https://img/mercy.png", "9 hours"),
        )
        assert heroes["Games Won"][0] == Hero("Mercy", "https://img/mercy.png", "1,024")

    def test_hero_order_follows_document(self):
        heroes = _assembler(career_page()).top_heroes()
        assert [h.name for h in heroes["Games Won"]] == ["Mercy", "Reinhardt"]

    def test_no_comparison_section_is_empty(self):
        page = career_page(quick_play=mode_html("quick-play", QUICK_FEATURED, None, QUICK_CAREERS))
        assert _assembler(page).top_heroes() == {}

    def test_comparison_without_heroes_is_empty_list(self):
        comparisons = {"Time Played": [], "Games Won": QUICK_COMPARISONS["Games Won"]}
        page = career_page(quick_play=mode_html("quick-play", QUICK_FEATURED, comparisons, QUICK_CAREERS))

        heroes = _assembler(page).top_heroes()

        assert heroes["Time Played"] == ()
        assert len(heroes["Games Won"]) == 2

    def test_hero_missing_image_raises_mismatch(self):
        section = comparisons_html(QUICK_COMPARISONS).replace(
            '<img src="https://img/mercy.png">', "", 1
        )
        page = career_page(quick_play=f'<div id="quick-play">{section}</div>')
        with pytest.raises(CorrelationMismatch):
            _assembler(page).top_heroes()


class TestCareerStats:
    """Test per-hero career stat categories."""

    def test_groups_and_categories(self):
        careers = _assembler(career_page()).career_stats()

        assert [c.hero_name for c in careers] == ["ALL HEROES", "Reinhardt"]
        all_heroes = careers[0]
        assert [c.name for c in all_heroes.categories] == ["Combat", "Assists"]
        assert all_heroes.categories[0].values == {
            "Melee Final Blows": "117",
            "Eliminations": "1,234",
        }
        assert all_heroes.categories[1].values == {"Healing Done": "1,003,201"}
        assert careers[1].categories[0].values == {"Charge Kills": "42"}

    def test_competitive_scope(self):
        careers = _assembler(career_page(), PlayMode.COMPETITIVE_PLAY).career_stats()
        assert len(careers) == len(COMPETITIVE_CAREERS)
        assert careers[0].categories[0].values == {"Eliminations": "321"}

    def test_duplicate_group_ids_collapse(self):
        groups = [QUICK_CAREERS[0], QUICK_CAREERS[0]]
        page = career_page(quick_play=mode_html("quick-play", QUICK_FEATURED, QUICK_COMPARISONS, groups))
        assembler = _assembler(page)
        assert assembler.stat_group_ids() == ["0x02E00000FFFFFFFF"]

    def test_group_without_hero_option_raises(self):
        section = careers_html(QUICK_CAREERS).replace('<option value="0x02E0000000000007">', '<option value="other">', 1)
        page = career_page(quick_play=f'<div id="quick-play">{section}</div>')
        with pytest.raises(SelectorNotFound):
            _assembler(page).career_stats()

    def test_group_without_id_raises(self):
        section = careers_html(QUICK_CAREERS).replace(
            'data-category-id="0x02E0000000000007"', "", 1
        )
        page = career_page(quick_play=f'<div id="quick-play">{section}</div>')
        with pytest.raises(SelectorNotFound) as excinfo:
            _assembler(page).career_stats()
        assert excinfo.value.attr == "data-category-id"

    def test_value_column_shorter_raises_mismatch(self):
        section = careers_html(QUICK_CAREERS).replace("<td>117</td>", "", 1)
        page = career_page(quick_play=f'<div id="quick-play">{section}</div>')
        with pytest.raises(CorrelationMismatch):
            _assembler(page).career_stats()

    def test_no_career_section(self):
        page = career_page(quick_play=mode_html("quick-play", QUICK_FEATURED, QUICK_COMPARISONS, ()))
        assert _assembler(page).career_stats() == ()


class TestAssemble:
    """Test the full per-mode assembly."""

    def test_modes_use_identical_algorithm(self):
        """The same markup under either mode id yields the same PlayStat."""
        body = mode_html("competitive-play", QUICK_FEATURED, QUICK_COMPARISONS, QUICK_CAREERS)
        competitive_page = career_page(quick_play="", competitive_play=body)
        quick_page = career_page(competitive_play="")

        quick = _assembler(quick_page, PlayMode.QUICK_PLAY).assemble()
        competitive = _assembler(competitive_page, PlayMode.COMPETITIVE_PLAY).assemble()

        assert quick == competitive

    def test_empty_mode_section(self):
        page = career_page(quick_play='<div id="quick-play"></div>')
        stat = _assembler(page).assemble()
        assert stat.featured_stats == {}
        assert stat.top_heroes == {}
        assert stat.career_stats == ()
