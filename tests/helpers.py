# tests/helpers.py
"""Builders for synthetic career pages shaped like the live site's markup."""

from html import escape
from typing import Dict, List, Optional, Sequence, Tuple

HeroRow = Tuple[str, str, str]                       # name, image url, value
CategoryRows = Tuple[str, Sequence[Tuple[str, str]]]  # category title, (stat, value) rows
StatGroup = Tuple[str, str, Sequence[CategoryRows]]  # group id, hero name, categories
Card = Tuple[str, str, str, bool]                    # title, description, image url, disabled

PORTRAIT_URL = "https://blzgdapipro-a.akamaihd.net/game/unlocks/0x0250000000000EF7.png"
LEVEL_URL = "https://blzgdapipro-a.akamaihd.net/game/playerlevelrewards/0x025000000000091F_Border.png"
STARS_URL = "https://blzgdapipro-a.akamaihd.net/game/playerlevelrewards/0x025000000000091F_Rank.png"
RANK_URL = "https://blzgdapipro-a.akamaihd.net/game/rank-icons/season-2/rank-5.png"

QUICK_FEATURED = [("Eliminations", "1,234"), ("Deaths", "56")]
QUICK_COMPARISONS = {
    "Time Played": [
        ("Reinhardt", "https://img/reinhardt.png", "12 hours"),
        ("Mercy", "https://img/mercy.png", "9 hours"),
    ],
    "Games Won": [
        ("Mercy", "https://img/mercy.png", "1,024"),
        ("Reinhardt", "https://img/reinhardt.png", "87"),
    ],
}
QUICK_CAREERS = [
    ("0x02E00000FFFFFFFF", "ALL HEROES", [
        ("Combat", [("Melee Final Blows", "117"), ("Eliminations", "1,234")]),
        ("Assists", [("Healing Done", "1,003,201")]),
    ]),
    ("0x02E0000000000007", "Reinhardt", [
        ("Hero Specific", [("Charge Kills", "42")]),
    ]),
]

COMPETITIVE_FEATURED = [("Eliminations", "321")]
COMPETITIVE_COMPARISONS = {
    "Time Played": [("Mercy", "https://img/mercy.png", "3 hours")],
}
COMPETITIVE_CAREERS = [
    ("0x02E00000FFFFFFFF", "ALL HEROES", [
        ("Combat", [("Eliminations", "321")]),
    ]),
]

ACHIEVEMENTS = [
    ("General", [
        ("Level 10", "Reach level 10.", "https://img/a-level10.png", False),
        ("Level 25", "Reach level 25.", "https://img/a-level25.png", False),
    ]),
    ("Tank", [
        ("Shutout", "Block 1000 damage.", "https://img/a-shutout.png", False),
        ("Power Overwhelming", "Kill 4 players with one charge.", "https://img/a-power.png", True),
        ("Earthshaker", "Stun 5 players.", "https://img/a-earth.png", False),
    ]),
]


def featured_html(pairs: Sequence[Tuple[str, str]]) -> str:
    items = "".join(
        '<li><div class="card"><div class="card-content">'
        f'<h3 class="card-heading">{escape(value)}</h3><p class="card-copy">{escape(title)}</p>'
        '</div></div></li>'
        for title, value in pairs
    )
    return f'<section class="highlights-section"><ul>{items}</ul></section>'


def comparisons_html(comparisons: Dict[str, Sequence[HeroRow]]) -> str:
    options = "".join(
        f'<option value="overwatch.guid.{i:04d}">{escape(label)}</option>'
        for i, label in enumerate(comparisons)
    )
    blocks = []
    for i, heroes in enumerate(comparisons.values()):
        bars = "".join(
            f'<div class="progress-2"><img src="{escape(image)}">'
            '<div class="bar-container"><div class="bar-text">'
            f'<div class="title">{escape(name)}</div><div class="description">{escape(value)}</div>'
            '</div></div></div>'
            for name, image, value in heroes
        )
        blocks.append(
            f'<div class="progress-category" data-group-id="comparisons" '
            f'data-category-id="overwatch.guid.{i:04d}">{bars}</div>'
        )
    return (
        '<section class="hero-comparison-section">'
        f'<select data-group-id="comparisons">{options}</select>'
        f'{"".join(blocks)}</section>'
    )


def careers_html(groups: Sequence[StatGroup]) -> str:
    options = "".join(
        f'<option value="{escape(group_id)}">{escape(hero)}</option>'
        for group_id, hero, _ in groups
    )
    blocks = []
    for group_id, _, categories in groups:
        columns = []
        for title, rows in categories:
            body = "".join(
                f"<tr><td>{escape(stat)}</td><td>{escape(value)}</td></tr>" for stat, value in rows
            )
            columns.append(
                '<div class="column"><div class="card-stat-block"><table class="data-table">'
                f'<thead><tr><th colspan="2"><span class="stat-title">{escape(title)}</span></th></tr></thead>'
                f'<tbody>{body}</tbody></table></div></div>'
            )
        blocks.append(
            f'<div class="row" data-group-id="stats" data-category-id="{escape(group_id)}">'
            f'{"".join(columns)}</div>'
        )
    return (
        '<section class="career-stats-section">'
        f'<select data-group-id="stats">{options}</select>'
        f'{"".join(blocks)}</section>'
    )


def mode_html(
    mode_id: str,
    featured: Sequence[Tuple[str, str]] = (),
    comparisons: Optional[Dict[str, Sequence[HeroRow]]] = None,
    careers: Sequence[StatGroup] = (),
) -> str:
    sections = [featured_html(featured) if featured else ""]
    sections.append(comparisons_html(comparisons) if comparisons else "")
    sections.append(careers_html(careers) if careers else "")
    return f'<div id="{mode_id}" data-mode="{mode_id}">{"".join(sections)}</div>'


def achievements_html(categories: Sequence[Tuple[str, Sequence[Card]]]) -> str:
    options = "".join(
        f'<option value="{i}">{escape(name)}</option>' for i, (name, _) in enumerate(categories)
    )
    blocks = []
    for i, (_, cards) in enumerate(categories):
        items = "".join(
            '<li>'
            f'<div class="achievement-card{" m-disabled" if disabled else ""}">'
            f'<img src="{escape(image)}" class="media-card-fill"></div>'
            f'<div class="tooltip-tip"><h6 class="h5">{escape(title)}</h6><p class="h6">{escape(description)}</p></div>'
            '</li>'
            for title, description, image, disabled in cards
        )
        blocks.append(f'<div data-group-id="achievements" data-category-id="{i}"><ul>{items}</ul></div>')
    return (
        '<section id="achievements-section">'
        f'<select data-group-id="achievements">{options}</select>'
        f'{"".join(blocks)}</section>'
    )


def career_page(
    name: str = "meinside",
    level: str = "25",
    detail: Optional[str] = "123 games won",
    stars: bool = True,
    rank: Optional[str] = "2,345",
    quick_play: Optional[str] = None,
    competitive_play: Optional[str] = None,
    achievements: Optional[str] = None,
) -> str:
    """A complete career page; every section can be overridden with raw markup."""
    if quick_play is None:
        quick_play = mode_html("quick-play", QUICK_FEATURED, QUICK_COMPARISONS, QUICK_CAREERS)
    if competitive_play is None:
        competitive_play = mode_html(
            "competitive-play", COMPETITIVE_FEATURED, COMPETITIVE_COMPARISONS, COMPETITIVE_CAREERS
        )
    if achievements is None:
        achievements = achievements_html(ACHIEVEMENTS)

    stars_html = f'<div class="player-rank" style="background-image:url({STARS_URL})"></div>' if stars else ""
    rank_html = ""
    if rank is not None:
        rank_html = (
            f'<div class="competitive-rank"><img src="{RANK_URL}">'
            f'<div class="u-align-center h6">{rank}</div></div>'
        )
    detail_html = f'<p class="masthead-detail h4"><span>{escape(detail)}</span></p>' if detail is not None else ""

    return (
        "<!DOCTYPE html><html><head><title>Overwatch</title></head><body>"
        '<div class="masthead"><div class="masthead-player">'
        f'<img src="{PORTRAIT_URL}" class="player-portrait">'
        f'<h1 class="header-masthead">{escape(name)}</h1>'
        f'<div class="player-level" style="background-image:url({LEVEL_URL})">'
        f'<div class="u-vertical-center">{level}</div>{stars_html}</div>'
        f"{rank_html}</div>{detail_html}</div>"
        f"{quick_play}{competitive_play}{achievements}"
        "</body></html>"
    )
