"""Page head, site header and the wrapper the footer closes."""

from . import _global
from . import footer
from .context import RenderContext
from .escaping import esc_attr, esc_html


def css() -> str:
    return """
.site-header {
    border-bottom: 1px solid var(--border-color);
    padding: var(--space-xl) 0;
}
.site-title { font-size: 1.75rem; }
.site-title a { color: var(--text-primary); }
.site-description { color: var(--text-muted); }
.home-page .site-header { text-align: center; }
main { padding: var(--space-2xl) 0; }
"""


def head(title: str, description: str) -> str:
    title = esc_html(title)
    description = esc_attr(description)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta name="description" content="{description}">
    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:type" content="profile">
    <style>
{_global.css()}
{css()}
{footer.css()}
    </style>
</head>
"""


def header(site_name: str, tagline: str) -> str:
    return f"""<header class="site-header" role="banner">
    <div class="container">
        <h1 class="site-title"><a href="/">{esc_html(site_name)}</a></h1>
        <p class="site-description">{esc_html(tagline)}</p>
    </div>
</header>
"""


def page_wrapper(ctx: RenderContext, title: str, description: str, tagline: str, body_html: str) -> str:
    """Open the document and its containers, then let the footer close them."""
    body_class = "home-page" if ctx.is_home_template else "page"
    return (
        head(title, description)
        + f'<body class="{body_class}">\n'
        + "<!-- BEGIN #wrapper -->\n"
        + '<div id="wrapper">\n'
        + header(ctx.site_name, tagline)
        + "<!-- BEGIN .container -->\n"
        + '<main class="container" role="main">\n'
        + body_html
        + footer.render(ctx)
    )
