"""Navigation menus assigned to theme locations."""

from pydantic import BaseModel

from .escaping import esc_attr, esc_html

SOCIAL_MENU = "social-menu"


class MenuItem(BaseModel):
    title: str
    url: str
    classes: tuple[str, ...] = ()
    children: tuple["MenuItem", ...] = ()


MenuItem.model_rebuild()


class Menu(BaseModel):
    name: str
    items: tuple[MenuItem, ...] = ()


class NavMenus:
    def __init__(self):
        self._locations: dict[str, str] = {}
        self._assigned: dict[str, Menu] = {}

    def register_locations(self, locations: dict[str, str]):
        self._locations.update(locations)

    def assign(self, location: str, menu: Menu):
        if location not in self._locations:
            raise KeyError(f"Menu location not registered: {location}")
        self._assigned[location] = menu

    def has_menu(self, location: str) -> bool:
        return location in self._assigned

    def render(
        self,
        location: str,
        *,
        depth: int = 0,
        container: str = "div",
        container_class: str = "",
        menu_class: str = "menu",
        link_before: str = "",
        link_after: str = "",
    ) -> str:
        """Render the menu at a location as nested <ul> lists.

        depth=0 renders every level, depth=1 a flat list of top-level items.
        An empty string is returned when nothing is assigned to the location.
        """
        menu = self._assigned.get(location)
        if menu is None:
            return ""

        def render_items(items: tuple[MenuItem, ...], level: int) -> str:
            lines = []
            for item in items:
                classes = ["menu-item", *item.classes]
                nested = ""
                if item.children and (depth == 0 or level < depth):
                    classes.append("menu-item-has-children")
                    nested = f'<ul class="sub-menu">{render_items(item.children, level + 1)}</ul>'
                lines.append(
                    f'<li class="{esc_attr(" ".join(classes))}">'
                    f'<a href="{esc_attr(item.url)}">{link_before}{esc_html(item.title)}{link_after}</a>'
                    f"{nested}</li>"
                )
            return "\n".join(lines)

        menu_id = f"menu-{menu.name.lower().replace(' ', '-')}"
        ul = f'<ul id="{esc_attr(menu_id)}" class="{esc_attr(menu_class)}">\n{render_items(menu.items, 1)}\n</ul>'
        if not container:
            return ul
        return f'<{container} class="{esc_attr(container_class)}">{ul}</{container}>'
