"""Theme wiring: registries populated from config, one RenderContext per render."""

import datetime
from functools import partial

from . import _common
from . import footer
from .config import PageConfig, SiteConfig
from .context import PageKind, RenderContext
from .hooks import FooterHooks
from .i18n import Translator
from .menus import SOCIAL_MENU, Menu, MenuItem, NavMenus
from .widgets import FOOTER_WIDGETS, WidgetAreas, text_widget

WIDGET_PLUGINS = ("Organic_Widgets_Pro", "Organic_Widgets")


class Theme:
    def __init__(self, config: SiteConfig):
        self.config = config
        self.widgets = WidgetAreas()
        self.menus = NavMenus()
        self.hooks = FooterHooks()
        self.translator = Translator(config.locale)

        self.widgets.register(FOOTER_WIDGETS, "Footer Widgets")
        self.menus.register_locations({SOCIAL_MENU: "Social Menu"})

    @classmethod
    def from_config(cls, config: SiteConfig) -> "Theme":
        theme = cls(config)
        for widget in config.widgets:
            theme.widgets.add_widget(FOOTER_WIDGETS, text_widget(widget.id, widget.title, widget.text))
        if config.social_links:
            items = tuple(
                MenuItem(title=link.title, url=link.url, classes=(f"menu-item-{link.icon}",) if link.icon else ())
                for link in config.social_links
            )
            theme.menus.assign(SOCIAL_MENU, Menu(name="Social", items=items))
        for handle, src in config.footer_scripts.items():
            theme.hooks.enqueue_script(handle, src)
        return theme

    @property
    def widgets_plugin_present(self) -> bool:
        return any(plugin in self.config.plugins for plugin in WIDGET_PLUGINS)

    def context_for(self, page_kind: PageKind = PageKind.DEFAULT, year: int | None = None) -> RenderContext:
        return RenderContext(
            widget_area_active=self.widgets.is_active(FOOTER_WIDGETS),
            widgets_plugin_present=self.widgets_plugin_present,
            is_home_template=page_kind is PageKind.HOME,
            social_menu_registered=self.menus.has_menu(SOCIAL_MENU),
            site_name=self.config.site.name,
            current_year=year if year is not None else datetime.date.today().year,
            widgets=partial(self.widgets.render, FOOTER_WIDGETS),
            social_menu=partial(
                self.menus.render,
                SOCIAL_MENU,
                depth=1,
                container_class="social-menu",
                menu_class="social-icons",
                link_before='<span class="screen-reader-text">',
                link_after="</span>",
            ),
            footer_hooks=self.hooks.contributors(),
            translator=self.translator,
            author=self.config.author,
        )

    def render_footer(self, page_kind: PageKind = PageKind.DEFAULT, year: int | None = None) -> str:
        return footer.render(self.context_for(page_kind, year))

    def render_page(self, page: PageConfig, year: int | None = None) -> str:
        site = self.config.site
        ctx = self.context_for(page.kind, year)
        title = site.name if page.kind is PageKind.HOME else f"{page.title} - {site.name}"
        return _common.page_wrapper(
            ctx,
            title=title,
            description=site.description or site.tagline,
            tagline=site.tagline,
            body_html=page.body,
        )
