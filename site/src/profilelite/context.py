"""Per-render context handed to the footer by the host."""

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from .i18n import Translator

HOME_TEMPLATE = "template-home.php"


def _nothing() -> str:
    return ""


# ##################################################################
# page kind
# closed set of page templates the theme ships
class PageKind(str, Enum):
    DEFAULT = ""
    HOME = HOME_TEMPLATE

    @classmethod
    def from_template(cls, template: str | None) -> "PageKind":
        for kind in cls:
            if kind.value == (template or ""):
                return kind
        return cls.DEFAULT


# ##################################################################
# author
# attribution printed under the copyright line
class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Profile Lite Authors"
    email: str = "contact@profile-lite.example"
    profile_url: str = "https://www.linkedin.com/in/profile-lite"
    profile_label: str = "Profile Lite Authors"


# ##################################################################
# render context
# read-only inputs of a single footer render
class RenderContext(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    widget_area_active: bool = False
    widgets_plugin_present: bool = False
    is_home_template: bool = False
    social_menu_registered: bool = False
    site_name: str
    current_year: int

    widgets: Callable[[], str] = _nothing
    social_menu: Callable[[], str] = _nothing
    footer_hooks: tuple[Callable[[], str], ...] = ()

    translator: Translator = Field(default_factory=Translator)
    author: Author = Field(default_factory=Author)

    @property
    def show_widgets(self) -> bool:
        return self.widget_area_active and self.widgets_plugin_present

    @property
    def show_social_menu(self) -> bool:
        return self.social_menu_registered and not self.is_home_template
