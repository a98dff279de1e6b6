"""Widget areas: named regions of the page filled with widgets."""

from dataclasses import dataclass, field
from typing import Callable

from .escaping import esc_attr, esc_html

FOOTER_WIDGETS = "footer-widgets"


@dataclass(frozen=True)
class Widget:
    widget_id: str
    title: str
    render: Callable[[], str]
    css_class: str = "widget"


@dataclass
class WidgetArea:
    area_id: str
    name: str
    before_widget: str = '<div id="%1$s" class="widget %2$s">'
    after_widget: str = "</div>"
    before_title: str = '<h6 class="widget-title">'
    after_title: str = "</h6>"
    widgets: list[Widget] = field(default_factory=list)


def text_widget(widget_id: str, title: str, text: str) -> Widget:
    """Build a widget printing a paragraph of escaped text."""
    body = f'<div class="textwidget"><p>{esc_html(text)}</p></div>'
    return Widget(widget_id=widget_id, title=title, render=lambda: body, css_class="widget_text")


class WidgetAreas:
    def __init__(self):
        self._areas: dict[str, WidgetArea] = {}

    def register(self, area_id: str, name: str, **wrappers) -> WidgetArea:
        area = WidgetArea(area_id=area_id, name=name, **wrappers)
        self._areas[area_id] = area
        return area

    def add_widget(self, area_id: str, widget: Widget):
        if area_id not in self._areas:
            raise KeyError(f"Widget area not registered: {area_id}")
        self._areas[area_id].widgets.append(widget)

    def is_active(self, area_id: str) -> bool:
        area = self._areas.get(area_id)
        return bool(area and area.widgets)

    def render(self, area_id: str) -> str:
        area = self._areas.get(area_id)
        if area is None:
            return ""

        parts = []
        for widget in area.widgets:
            before = area.before_widget.replace("%1$s", esc_attr(widget.widget_id))
            before = before.replace("%2$s", esc_attr(widget.css_class))
            title = f"{area.before_title}{esc_html(widget.title)}{area.after_title}" if widget.title else ""
            parts.append(f"{before}{title}{widget.render()}{area.after_widget}")
        return "\n".join(parts)
