# tests/test_renderer.py

import pytest

from owstat.errors import EncodeError
from owstat.renderer import render_html
from owstat.scraper import parse_profile

from tests.helpers import RANK_URL, STARS_URL, career_page


def _profile(**page_kwargs):
    return parse_profile(career_page(**page_kwargs), battletag="meinside#3155", platform="pc", region="kr")


class TestRenderHtml:
    """Test the HTML report."""

    def test_title_and_identity(self):
        html = render_html(_profile())

        assert "<title>Overwatch: Stats of meinside#3155 / kr (pc)</title>" in html
        assert '<div class="info-name">meinside</div>' in html
        assert '<div class="level-text">25</div>' in html
        assert f"url({STARS_URL})" in html

    def test_sections(self):
        html = render_html(_profile())

        assert '<div id="quick-play">' in html
        assert '<div id="competitive-play">' in html
        assert '<span class="value">1,234</span>' in html
        assert "<h3>Time Played</h3>" in html
        assert "<h4>Combat</h4>" in html

    def test_rank_block_only_when_ranked(self):
        assert f'<img src="{RANK_URL}" class="rank">' in render_html(_profile())

        unranked = render_html(_profile(rank=None))
        assert 'class="rank"' not in unranked
        assert '<div id="competitive-play">' not in unranked

    def test_non_achieved_faded(self):
        html = render_html(_profile())
        assert '<li class="not-achieved"><span class="key"><img src="https://img/a-power.png"' in html

    def test_text_is_escaped(self):
        html = render_html(_profile(name="<b>meinside</b>"))
        assert "&lt;b&gt;meinside&lt;/b&gt;" in html
        assert "<b>meinside</b>" not in html

    def test_custom_template(self):
        html = render_html(_profile(), template="$battletag is level $level")
        assert html == "meinside#3155 is level 25"

    def test_unknown_placeholder(self):
        with pytest.raises(EncodeError):
            render_html(_profile(), template="$battletag $favorite_hero")
