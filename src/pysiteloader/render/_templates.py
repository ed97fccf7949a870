"""Jinja2 templates for the rendered fragments.

Autoescaping is off: labels, URLs and icon classes come from first-party
content files and are interpolated verbatim.
"""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined

_TEMPLATES: dict[str, str] = {
    "social_links.html": """\
{% for link in links %}
<a href="{{ link.url }}" target="_blank" class="{{ link.platform }}"><i class="{{ link.icon_class }}"></i></a>
{% endfor %}
""",
    "navigation.html": """\
<ul>
{% for item in items %}
{% if item.has_submenu %}
<li class="dropdown"><a href="{{ item.url }}" class="{{ link_class(item) }}"><i class="{{ item.icon_class }} navicon"></i> <span>{{ item.label }}</span> <i class="bi bi-chevron-down toggle-dropdown"></i></a>
<ul>
{% for sub in item.submenu %}
<li><a href="{{ sub.url }}" class="scrollto"><i class="{{ sub.icon_class }} navicon"></i> <span>{{ sub.label }}</span></a></li>
{% endfor %}
</ul>
</li>
{% else %}
<li><a href="{{ item.url }}" class="{{ link_class(item) }}"><i class="{{ item.icon_class }} navicon"></i> <span>{{ item.label }}</span></a></li>
{% endif %}
{% endfor %}
</ul>
""",
    "menu_footer.html": """\
<div class="container">
<div class="copyright">
<p style="text-align: center;">© Copyright · {{ year }} <strong><span>
<a href="{{ footer.copyright_logo_link }}"><img style="height: 20px;" src="{{ logo_path }}" alt="Logo" class="img-fluid rounded-circle"></a>
<a href="{{ footer.copyright_text_link }}">{{ footer.copyright_owner }}</a>
</span></strong></p>
</div>
<div class="credits">
{% for link in footer.links %}<a href="{{ link.url }}">{{ link.label }}</a>{% if not loop.last %} | {% endif %}{% endfor %}

</div>
</div>
""",
    "page_footer.html": """\
<div class="container">
<div class="copyright text-center">
<p>© <span>Copyright</span> <strong class="px-1 sitename">{{ footer.sitename }}</strong><span>All Rights Reserved</span></p>
</div>
<div class="credits">
Designed by <a target="_blank" href="{{ footer.design_link }}">{{ footer.design_credit }}</a>
</div>
</div>
""",
}

_env = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


def render_template(name: str, **context: Any) -> str:
    return _env.get_template(name).render(**context)
