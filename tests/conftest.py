from __future__ import annotations

import asyncio
import copy
from typing import Any

import pytest

from pysiteloader.exceptions import SiteFetchError

SHELL_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Loading</title></head>
<body class="index-page">
<header id="header">
  <div class="profile-img"><img src="" alt="profile"></div>
  <a href="index.html" class="logo"><img src="" alt="logo"><h1 class="sitename">Placeholder</h1></a>
  <div class="social-links"></div>
  <nav id="navmenu" class="navmenu"><p>static menu</p></nav>
  <footer id="menu_footer"></footer>
</header>
<main>
  <select id="cvModeSelector">
    <option value="standard">Standard</option>
    <option value="one-page">One page</option>
  </select>
  <section id="standard-page-section">standard</section>
  <section id="one-page-section">one page</section>
</main>
<footer id="footer"></footer>
</body>
</html>
"""

SITE_SECTION: dict[str, Any] = {
    "site_info": {"title": "Jane Doe | Research Portfolio"},
    "cache_settings": {"expiration_seconds": 3600},
    "assets": {
        "images": {"profile_image_pp": "assets/img/profile.jpg"},
        "icons": {"logo_png": "assets/img/logo.png"},
    },
    "social_links": {
        "main": [
            {"platform": "linkedin", "url": "https://linkedin.com/in/janedoe", "icon_class": "bi bi-linkedin"},
            {"platform": "google-old", "url": "https://scholar.google.com/old", "icon_class": "bi bi-google"},
            {"platform": "github", "url": "https://github.com/janedoe", "icon_class": "bi bi-github"},
            {"platform": "researchgate-fab", "url": "https://researchgate.net/x", "icon_class": "fab fa-rg"},
        ]
    },
    "navigation": {
        "main_menu": [
            {"label": "Home", "url": "#hero", "icon_class": "bi bi-house"},
            {"label": "About", "url": "#about", "icon_class": "bi bi-person"},
            {
                "label": "Resume",
                "url": "#resume",
                "icon_class": "bi bi-file-earmark",
                "is_dropdown": True,
                "submenu": [
                    {"label": "Education", "url": "#education", "icon_class": "bi bi-book"},
                    {"label": "Experience", "url": "#experience", "icon_class": "bi bi-briefcase"},
                ],
            },
        ],
        "details_menu": [
            {"label": "Back", "url": "./index.html", "icon_class": "bi bi-arrow-left"},
            {"label": "Top", "url": "#top", "icon_class": "bi bi-arrow-up"},
        ],
    },
    "footer_meta": {
        "menu_footer": {
            "copyright_year": "AUTO",
            "copyright_owner": "Jane Doe",
            "copyright_logo_link": "https://janedoe.example",
            "copyright_text_link": "https://janedoe.example/about",
            "links": [
                {"label": "Copyright", "url": "copyright.html"},
                {"label": "Diary", "url": "diary.html"},
                {"label": "Gallery", "url": "gallery.html"},
            ],
        },
        "main_page_footer": {
            "sitename": "Jane Doe",
            "design_credit": "BootstrapMade",
            "design_link": "https://bootstrapmade.com/",
        },
    },
}

SECTIONS: dict[str, Any] = {
    "site": SITE_SECTION,
    "personal_info": {"name": "Jane Doe", "hero": {"title_main": "Jane Doe"}},
    "skills": {"groups": [{"name": "Python", "level": 90}]},
}


class FakeTransport:
    """In-memory transport. Sections listed in *failures* fail with that status."""

    def __init__(self, sections: dict[str, Any], failures: dict[str, int] | None = None) -> None:
        self._sections = sections
        self._failures = failures or {}
        self.calls: list[str] = []

    async def fetch_section(self, section: str) -> dict[str, Any]:
        self.calls.append(section)
        await asyncio.sleep(0)
        status = self._failures.get(section)
        if status is None and section not in self._sections:
            status = 404
        if status is not None:
            raise SiteFetchError(f"Failed to load {section}.json", section=section, status_code=status)
        return copy.deepcopy(self._sections[section])


class FrozenClock:
    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def sections() -> dict[str, Any]:
    return copy.deepcopy(SECTIONS)


@pytest.fixture
def shell_html() -> str:
    return SHELL_HTML
