import os
import setproctitle
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from profilelite.config import SiteConfig, load_config
from profilelite.context import PageKind
from profilelite.generator import generate_error, generate_index
from profilelite.theme import Theme

PORT = 8765
BASE_DIR = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "site" / "local" / "config.json"
CONFIG_ENV = "PROFILELITE_CONFIG"

# global state for the theme, built once at startup
theme: Theme | None = None


# ##################################################################
# config path
# reads the config location from the environment or uses the bundled one
def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH))


# ##################################################################
# load theme
# parses the site config and populates widget, menu and hook registries
def load_theme(path: Path | None = None) -> Theme:
    config: SiteConfig = load_config(path or config_path())
    return Theme.from_config(config)


# ##################################################################
# get theme
# returns the startup theme, loading it lazily outside the lifespan
def get_theme() -> Theme:
    global theme
    if theme is None:
        theme = load_theme()
    return theme


# ##################################################################
# lifespan
# loads the theme on startup and drops it on shutdown
@asynccontextmanager
async def lifespan(_app: FastAPI):
    global theme
    theme = load_theme()
    yield
    theme = None


app = FastAPI(title="Profile Lite", lifespan=lifespan)

# mount the site static directory for scripts the footer hook references
static_dir = config_path().parent.parent / "static"
if static_dir.is_dir():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# ##################################################################
# health endpoint
# returns simple status for health checks and test fixtures
@app.get("/health")
async def health():
    return {"status": "ok"}


# ##################################################################
# root endpoint
# serves the home page rendered with the home template
@app.get("/", response_class=HTMLResponse)
async def root():
    return HTMLResponse(generate_index(get_theme()))


# ##################################################################
# footer fragment endpoint
# renders only the footer for the given page template
@app.get("/footer", response_class=HTMLResponse)
async def footer_fragment(template: str = "", year: int | None = None):
    page_kind = PageKind.from_template(template)
    return HTMLResponse(get_theme().render_footer(page_kind, year))


# ##################################################################
# page endpoint (must be last to avoid capturing other routes)
# serves a configured page by slug, 404 page for unknown slugs
@app.get("/{slug}", response_class=HTMLResponse)
async def page(slug: str):
    current = get_theme()
    page_config = current.config.page(slug)
    if page_config is None:
        raise HTTPException(status_code=404, detail=f"Page not found: {slug}")
    return HTMLResponse(current.render_page(page_config))


# ##################################################################
# not found handler
# renders the themed error page instead of a json body
@app.exception_handler(404)
async def not_found(_request, _exc):
    return HTMLResponse(generate_error(get_theme()), status_code=404)


# ##################################################################
# main
# starts the uvicorn server with configured host and port
def main():
    setproctitle.setproctitle("profile-lite-server")
    uvicorn.run(app, host="127.0.0.1", port=PORT)


# ##################################################################
# entry point
# standard python dispatch for main
if __name__ == "__main__":
    main()
