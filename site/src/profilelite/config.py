"""Site configuration read from local/config.json."""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from .context import Author, PageKind
from .i18n import DEFAULT_LOCALE


class SiteInfo(BaseModel):
    name: str = "Profile Lite"
    tagline: str = "A personal profile"
    description: str = ""


class SocialLink(BaseModel):
    title: str
    url: str
    icon: str = ""


class TextWidgetConfig(BaseModel):
    id: str
    title: str = ""
    text: str


class PageConfig(BaseModel):
    slug: str
    title: str
    template: str = ""
    body: str = ""

    @property
    def kind(self) -> PageKind:
        return PageKind.from_template(self.template)


class SiteConfig(BaseModel):
    site: SiteInfo = Field(default_factory=SiteInfo)
    locale: str = DEFAULT_LOCALE
    author: Author = Field(default_factory=Author)
    plugins: list[str] = []
    social_links: list[SocialLink] = []
    widgets: list[TextWidgetConfig] = []
    footer_scripts: dict[str, str] = {}
    pages: list[PageConfig] = []

    def page(self, slug: str) -> PageConfig | None:
        for page in self.pages:
            if page.slug == slug:
                return page
        return None


def load_config(path: Path) -> SiteConfig:
    """Load and validate a config file."""
    return SiteConfig.model_validate(json.loads(path.read_text()))
