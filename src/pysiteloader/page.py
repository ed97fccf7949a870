"""Mutable page shell.

:class:`Page` wraps a parsed HTML document with the small slice of browser
behavior the loader needs: lookup by id, inner-HTML replacement, class and
visibility toggles, a history-style URL that can be rewritten without
navigation, and delegated event listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from bs4 import BeautifulSoup, Tag

_logger = logging.getLogger(__name__)

DEFAULT_PAGE_URL = "http://localhost/index.html"


# ------------------------------------------------------------------
# Tag helpers
# ------------------------------------------------------------------


def class_list(tag: Tag) -> list[str]:
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_class(tag: Tag, name: str) -> bool:
    return name in class_list(tag)


def add_class(tag: Tag, name: str) -> None:
    classes = class_list(tag)
    if name not in classes:
        classes.append(name)
        tag["class"] = classes


def remove_class(tag: Tag, name: str) -> None:
    classes = class_list(tag)
    if name in classes:
        classes.remove(name)
        if classes:
            tag["class"] = classes
        else:
            del tag["class"]


def toggle_class(tag: Tag, name: str) -> bool:
    """Toggle *name* on *tag*; return True when the class is now present."""
    if has_class(tag, name):
        remove_class(tag, name)
        return False
    add_class(tag, name)
    return True


def _parse_style(value: str) -> dict[str, str]:
    declarations: dict[str, str] = {}
    for part in value.split(";"):
        name, sep, val = part.partition(":")
        if sep and name.strip():
            declarations[name.strip().lower()] = val.strip()
    return declarations


def set_style(tag: Tag, prop: str, value: str) -> None:
    declarations = _parse_style(str(tag.get("style", "")))
    declarations[prop.lower()] = value
    tag["style"] = "; ".join(f"{k}: {v}" for k, v in declarations.items())


def get_style(tag: Tag, prop: str) -> str | None:
    return _parse_style(str(tag.get("style", ""))).get(prop.lower())


def is_displayed(tag: Tag) -> bool:
    return get_style(tag, "display") != "none"


# ------------------------------------------------------------------
# Events
# ------------------------------------------------------------------


@dataclass(slots=True)
class DomEvent:
    """A dispatched event.

    ``current_target`` is the element matched by the listener's selector,
    which may be an ancestor of ``target``.
    """

    type: str
    target: Tag
    current_target: Tag | None = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


EventHandler = Callable[[DomEvent], None]


@dataclass(slots=True)
class _Listener:
    event_type: str
    selector: str
    handler: EventHandler = field(repr=False)


class Page:
    """A page shell plus its location.

    Listeners are delegated from the document and keyed by name: binding the
    same key twice replaces the earlier handler, so re-binding after a
    re-render never accumulates duplicates.
    """

    def __init__(self, html: str, url: str = DEFAULT_PAGE_URL) -> None:
        self._soup = BeautifulSoup(html, "html.parser")
        self._history: list[str] = [url]
        self._listeners: dict[str, _Listener] = {}

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    @property
    def url(self) -> str:
        return self._history[-1]

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def file_name(self) -> str:
        """Last segment of the URL path (``""`` for a directory URL)."""
        path = urlsplit(self.url).path
        return path.rsplit("/", 1)[-1]

    def query_param(self, name: str) -> str | None:
        for key, value in parse_qsl(urlsplit(self.url).query, keep_blank_values=True):
            if key == name:
                return value
        return None

    def set_query_param(self, name: str, value: str) -> str:
        """Push a new history entry with *name* set to *value*.

        The document is left untouched; this never navigates.
        """
        parts = urlsplit(self.url)
        params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != name]
        params.append((name, value))
        new_url = urlunsplit(parts._replace(query=urlencode(params)))
        self._history.append(new_url)
        return new_url

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    @property
    def body(self) -> Tag | None:
        return self._soup.body

    @property
    def title(self) -> str:
        tag = self._soup.title
        return tag.get_text() if tag is not None else ""

    @title.setter
    def title(self, value: str) -> None:
        tag = self._soup.title
        if tag is None:
            head = self._soup.head
            if head is None:
                head = self._soup.new_tag("head")
                html = self._soup.html
                if html is not None:
                    html.insert(0, head)
                else:
                    self._soup.insert(0, head)
            tag = self._soup.new_tag("title")
            head.append(tag)
        tag.string = value

    def by_id(self, element_id: str) -> Tag | None:
        return self._soup.find(id=element_id)

    def select_one(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def select(self, selector: str) -> list[Tag]:
        return list(self._soup.select(selector))

    def set_inner_html(self, tag: Tag, html: str) -> None:
        """Replace every child of *tag* with the parsed *html* fragment."""
        fragment = BeautifulSoup(html, "html.parser")
        tag.clear()
        for child in list(fragment.contents):
            tag.append(child.extract())

    def set_control_value(self, tag: Tag, value: str) -> None:
        """Set a form control's value; ``<select>`` marks the matching option."""
        if tag.name == "select":
            for option in tag.find_all("option"):
                if option.get("value", option.get_text()) == value:
                    option["selected"] = "selected"
                elif option.has_attr("selected"):
                    del option["selected"]
        else:
            tag["value"] = value

    def render(self) -> str:
        return str(self._soup)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on(self, event_type: str, selector: str, handler: EventHandler, *, key: str) -> None:
        """Register a delegated listener under *key*, replacing any previous one."""
        self._listeners[key] = _Listener(event_type, selector, handler)

    def off(self, key: str) -> None:
        self._listeners.pop(key, None)

    def listener_count(self, event_type: str | None = None) -> int:
        return sum(1 for lst in self._listeners.values() if event_type is None or lst.event_type == event_type)

    def dispatch(self, event_type: str, target: Tag) -> DomEvent:
        """Deliver an event at *target* to every matching delegated listener."""
        event = DomEvent(type=event_type, target=target)
        for listener in list(self._listeners.values()):
            if listener.event_type != event_type:
                continue
            matched = target.css.closest(listener.selector)
            if matched is None:
                continue
            event.current_target = matched
            listener.handler(event)
            if event.propagation_stopped:
                break
        return event

    def click(self, selector: str) -> DomEvent | None:
        """Click the first element matching *selector*; ``None`` if absent."""
        target = self.select_one(selector)
        if target is None:
            _logger.debug("Nothing to click for %s", selector)
            return None
        return self.dispatch("click", target)
