"""Static site generator - renders every configured page into local/web/."""

import shutil
import sys
from pathlib import Path

from . import _common
from .config import SiteConfig, load_config
from .context import PageKind
from .escaping import esc_html
from .theme import Theme


def _load_config(site_root: Path) -> SiteConfig:
    """Load site config from local/config.json."""
    return load_config(site_root / "local" / "config.json")


def generate_index(theme: Theme, year: int | None = None) -> str:
    """Generate the home page, using the configured home-template page if any."""
    for page in theme.config.pages:
        if page.kind is PageKind.HOME:
            return theme.render_page(page, year)

    site = theme.config.site
    ctx = theme.context_for(PageKind.HOME, year)
    return _common.page_wrapper(
        ctx,
        title=site.name,
        description=site.description or site.tagline,
        tagline=site.tagline,
        body_html="",
    )


def generate_error(theme: Theme, year: int | None = None) -> str:
    """Generate a not-found page wrapped in the regular header and footer."""
    _ = theme.translator.gettext
    site = theme.config.site
    body = f"""<div class="error-404">
    <h2>404</h2>
    <p>{esc_html(_("Page not found"))}</p>
    <a href="/">{esc_html(_("Back to Home"))}</a>
</div>
"""
    return _common.page_wrapper(
        theme.context_for(PageKind.DEFAULT, year),
        title=f"{_('Page not found')} - {site.name}",
        description=site.tagline,
        tagline=site.tagline,
        body_html=body,
    )


def generate_site(site_root: Path, year: int | None = None) -> Path:
    """Generate the complete static site.

    Args:
        site_root: Path to site/ directory.
        year: Copyright year, defaults to the current year.

    Returns:
        Path to the generated output directory (local/web/).
    """
    theme = Theme.from_config(_load_config(site_root))
    web_path = site_root / "local" / "web"
    web_path.mkdir(parents=True, exist_ok=True)

    pages = {
        "index.html": generate_index(theme, year),
        "error.html": generate_error(theme, year),
    }
    for page in theme.config.pages:
        if page.kind is not PageKind.HOME:
            pages[f"{page.slug}.html"] = theme.render_page(page, year)

    for filename, content in pages.items():
        (web_path / filename).write_text(content, encoding="utf-8")
        print(f"  Wrote {filename}")

    # Copy the assets footer scripts point at
    static_src = site_root / "static"
    if static_src.is_dir():
        shutil.copytree(static_src, web_path / "static", dirs_exist_ok=True)
        print("  Copied static/")

    return web_path


def main(argv: list[str] | None = None):
    """Generate the site rooted at argv[0], or at the working directory."""
    argv = sys.argv[1:] if argv is None else argv
    site_root = Path(argv[0]) if argv else Path.cwd()
    print(f"Generating site from {site_root}...")
    web_path = generate_site(site_root)
    print(f"Done: {web_path}")


if __name__ == "__main__":
    main()
