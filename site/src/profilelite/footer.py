"""Footer section: widgets, copyright, social links and the closing tags."""

from .context import RenderContext
from .escaping import antispambot, esc_attr, esc_html
from .i18n import sprintf

ATTRIBUTION = "Created by: %1$s, Contact: %2$s,  LinkedIn profile: %3$s"


def css() -> str:
    return """
.footer {
    background: var(--bg-secondary);
    border-top: 1px solid var(--border-color);
    padding: var(--space-2xl) 0;
    margin-top: var(--space-3xl);
}
.footer .row { max-width: var(--max-width); margin: 0 auto; padding: 0 var(--space-xl); }
.organic-ocw-container {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
    gap: var(--space-lg);
    padding-bottom: var(--space-xl);
}
.footer-information {
    display: flex;
    justify-content: space-between;
    align-items: center;
    flex-wrap: wrap;
    gap: var(--space-md);
    color: var(--text-muted);
    font-size: 0.875rem;
}
.footer-information .text-center { width: 100%; text-align: center; }
.footer-information .align-left { text-align: left; }
.footer-information .align-right { margin-left: auto; }
.social-icons {
    display: flex;
    gap: var(--space-md);
    list-style: none;
}
.social-icons a { color: var(--text-muted); }
.social-icons a:hover { color: var(--text-primary); }
.screen-reader-text {
    position: absolute;
    width: 1px;
    height: 1px;
    overflow: hidden;
    clip: rect(1px, 1px, 1px, 1px);
    white-space: nowrap;
}
"""


def _widgets(ctx: RenderContext) -> str:
    if not ctx.show_widgets:
        return ""

    return f"""
    <!-- BEGIN .row -->
    <div class="row">
        <section class="organic-ocw-container">
            {ctx.widgets()}
        </section>
    <!-- END .row -->
    </div>
"""


def _copyright(ctx: RenderContext) -> str:
    _ = ctx.translator.gettext
    align = "text-center" if ctx.is_home_template else "align-left"
    author = ctx.author
    profile_link = f'<a href="{esc_attr(author.profile_url)}"> {esc_html(author.profile_label)} </a>'
    attribution = sprintf(
        esc_html(_(ATTRIBUTION)),
        esc_html(author.name),
        antispambot(author.email),
        profile_link,
    )

    return f"""<div class="{align}">
                <p>{esc_html(_("Copyright"))} &copy; {esc_html(ctx.current_year)} &middot; {esc_html(_("All Rights Reserved"))} &middot; {esc_html(ctx.site_name)}</p>
                <p>{attribution}</p>
            </div>"""


def _social_nav(ctx: RenderContext) -> str:
    if not ctx.show_social_menu:
        return ""

    label = esc_attr(ctx.translator.gettext("Social Navigation"))
    return f"""
            <nav class="align-right" role="navigation" aria-label="{label}">
                {ctx.social_menu()}
            </nav>
"""


def render(ctx: RenderContext) -> str:
    """Render the page footer and close the document.

    Blocks are emitted in a fixed order (widgets, copyright, social menu,
    footer hook output, closing tags); errors raised by the context's
    producers propagate unchanged.
    """
    widgets = _widgets(ctx)
    copyright_block = _copyright(ctx)
    social = _social_nav(ctx)
    hook_output = "".join(contributor() for contributor in ctx.footer_hooks)

    return f"""
<!-- END .container -->
</main>

<!-- BEGIN .footer -->
<footer class="footer" role="contentinfo">
{widgets}
    <!-- BEGIN .row -->
    <div class="row">
        <!-- BEGIN .content -->
        <div class="content">
            <!-- BEGIN .footer-information -->
            <div class="footer-information">
            {copyright_block}
            {social}
            <!-- END .footer-information -->
            </div>
        <!-- END .content -->
        </div>
    <!-- END .row -->
    </div>

<!-- END .footer -->
</footer>

<!-- END #wrapper -->
</div>

{hook_output}
</body>
</html>
"""
