# owstat/renderer.py
"""
HTML report for an extracted profile.

The layout lives in REPORT_TEMPLATE; sections that repeat (featured stats,
heroes, career stats, achievements) are rendered to HTML fragments first and
substituted into the template with ``string.Template``.
"""

from __future__ import annotations

from html import escape
from string import Template
from typing import Iterable, List, Mapping, Optional

from owstat.errors import EncodeError
from owstat.models import AchievementCategory, PlayStat, Profile

REPORT_TEMPLATE = """<html>
	<head>
		<title>Overwatch: Stats of ${battletag} / ${region} (${platform})</title>
		<meta http-equiv="Content-Type" content="text/html; charset=utf-8">
		<meta name="viewport" content="user-scalable=yes, initial-scale=1.0, maximum-scale=1.0, minimum-scale=1.0, width=device-width">
		<style>
			body {
				display: block;
				padding: 3px;
				margin: 3px;
				overflow-x: hidden;
				background-color: #405275;
				color: #f0edf2;
				font-family: Futura,century gothic,arial,sans-serif;
			}
			h1,h2,h3,h4 { font-family: Koverwatch, sans-serif; margin-top: 12px; margin-bottom: 8px; }
			h1 { padding-left: 3px; }
			h2 { padding-left: 6px; }
			h3 { padding-left: 9px; }
			h4 { padding-left: 12px; }
			div.info-items { overflow-x: auto; overflow-y: hidden; height: 100px; width: 100%; }
			div.info-item { display: block; float: left; }
			div.info-name { font-size: 1.8rem; font-family: Koverwatch, sans-serif; margin-bottom: 10px; }
			div.info-detail { font-family: Koverwatch, sans-serif; margin-bottom: 5px; }
			img.profile { width: 80px; display: inline-block; vertical-align: middle; }
			div.level {
				display: inline-block;
				vertical-align: middle;
				width: 80px;
				height: 80px;
				text-align: center;
				position: relative;
				float: left;
				background-image: ${level_backgrounds};
				background-size: 80px 80px, 80px 40px;
				background-repeat: no-repeat, no-repeat;
				background-position: center, left bottom;
			}
			div.level-text { position: relative; top: 40%; width: 100%; font-size: 0.9rem; }
			div.rank { display: inline-block; width: 80px; height: 80px; text-align: center; position: relative; float: left; }
			div.rank.text { left: 0; position: absolute; top: 54px; width: 100%; font-size: 0.9rem; }
			img.rank { width: 60px; }
			img.hero-portrait { width: 32px; }
			img.achievement-icon { width: 32px; }
			ul { list-style-type: none; display: table; padding-left: 10px; }
			ul > li { display: table-row; }
			ul > li > span { display: table-cell; padding: 3px 5px 3px 5px; }
			li.not-achieved { opacity: 0.3; }
			span.key { color: rgba(240,237,242,.6); }
			span.key > img { vertical-align: middle; }
			span.value { font-weight: bold; }
		</style>
	</head>
	<body>
		<div id="info">
			<div class="info-name">${name}</div>
			<div class="info-detail">${detail}</div>
			<div class="info-items">
				<div class="info-item">
					<img src="${profile_image_url}" class="profile">
				</div>
				<div class="info-item">
					<div class="level">
						<div class="level-text">${level}</div>
					</div>
				</div>
${rank}
			</div>
		</div>
${quick_play}
${competitive_play}
		<div id="achievements">
			<h1>Achievements</h1>
			<ul>
${achievements}
			</ul>
		</div>
	</body>
</html>
"""


def _key_value(key: str, value: str, image_url: str = "", image_class: str = "") -> str:
    image = ""
    if image_url:
        image = f'<img src="{escape(image_url)}" class="{image_class}"> '
    return (
        f'<li><span class="key">{image}{escape(key)}</span>'
        f'<span class="value">{escape(value)}</span></li>'
    )


def _key_values(values: Mapping[str, str]) -> str:
    return "\n".join(_key_value(k, v) for k, v in values.items())


def _play_stat(element_id: str, title: str, stat: PlayStat) -> str:
    parts: List[str] = [
        f'<div id="{element_id}">',
        f"<h1>{escape(title)}</h1>",
        '<div class="featured-stats"><h2>Featured Stats</h2><ul>',
        _key_values(stat.featured_stats),
        "</ul></div>",
        '<div class="top-heroes"><h2>Top Heroes</h2><ul>',
    ]
    for label, heroes in stat.top_heroes.items():
        parts.append(f"<li><h3>{escape(label)}</h3><ul>")
        parts.extend(_key_value(h.name, h.value, h.image_url, "hero-portrait") for h in heroes)
        parts.append("</ul></li>")
    parts.append("</ul></div>")

    parts.append('<div class="career-stats"><h2>Career Stats</h2><ul>')
    for career in stat.career_stats:
        parts.append(f"<li><h3>{escape(career.hero_name)}</h3><ul>")
        for category in career.categories:
            parts.append(f"<li><h4>{escape(category.name)}</h4><ul>")
            parts.append(_key_values(category.values))
            parts.append("</ul></li>")
        parts.append("</ul></li>")
    parts.append("</ul></div>")
    parts.append("</div>")
    return "\n".join(parts)


def _achievements(categories: Iterable[AchievementCategory]) -> str:
    parts: List[str] = []
    for category in categories:
        parts.append(f"<li><h2>{escape(category.name)}</h2>")
        if category.achieved:
            parts.append("<ul>")
            parts.extend(
                _key_value(a.title, a.description, a.image_url, "achievement-icon")
                for a in category.achieved
            )
            parts.append("</ul>")
        if category.non_achieved:
            parts.append("<ul>")
            parts.extend(
                _key_value(a.title, a.description, a.image_url, "achievement-icon")
                .replace("<li>", '<li class="not-achieved">', 1)
                for a in category.non_achieved
            )
            parts.append("</ul>")
        parts.append("</li>")
    return "\n".join(parts)


def _rank(profile: Profile) -> str:
    if not profile.has_competitive_rank:
        return ""
    icon = ""
    if profile.competitive_rank_image_url:
        icon = f'<img src="{escape(profile.competitive_rank_image_url)}" class="rank">'
    return (
        '<div class="info-item"><div class="rank">'
        f'{icon}<div class="rank text">{profile.competitive_rank}</div>'
        "</div></div>"
    )


def _level_backgrounds(profile: Profile) -> str:
    urls = [profile.level_image_url, profile.level_star_image_url]
    return ", ".join(f"url({escape(u)})" for u in urls if u) or "none"


def render_html(profile: Profile, template: Optional[str] = None) -> str:
    """
    Render a profile into an HTML report.

    Args:
        profile: Extracted profile
        template: ``string.Template`` layout; defaults to REPORT_TEMPLATE

    Raises:
        EncodeError: If the template references an unknown placeholder or is malformed
    """
    competitive = ""
    if profile.competitive_play is not None:
        competitive = _play_stat("competitive-play", "Competitive Play", profile.competitive_play)

    fields = {
        "battletag": escape(profile.battletag),
        "platform": escape(profile.platform),
        "region": escape(profile.region),
        "name": escape(profile.name),
        "detail": escape(profile.detail),
        "profile_image_url": escape(profile.profile_image_url),
        "level": str(profile.level),
        "level_backgrounds": _level_backgrounds(profile),
        "rank": _rank(profile),
        "quick_play": _play_stat("quick-play", "Quick Play", profile.quick_play),
        "competitive_play": competitive,
        "achievements": _achievements(profile.achievements),
    }
    try:
        return Template(template or REPORT_TEMPLATE).substitute(fields)
    except (KeyError, ValueError) as e:
        raise EncodeError(f"HTML encode error: {e}") from e
