"""Screenshot capture of the rendered footer using Playwright."""

import sys
from pathlib import Path

from playwright.sync_api import sync_playwright

from profilelite.config import load_config
from profilelite.context import PageKind


def _page_urls(server_url: str, config_path: Path) -> dict[str, str]:
    config = load_config(config_path)
    urls = {"index": f"{server_url}/"}
    for page in config.pages:
        if page.kind is PageKind.HOME:
            continue
        urls[page.slug] = f"{server_url}/{page.slug}"
    return urls


def capture_footer_screenshots(server_url: str, output_dir: Path, config_path: Path) -> list[Path]:
    """Capture the footer element of the home page and every configured page.

    Requires a running profile-lite server and Playwright browsers installed.

    Args:
        server_url: URL of the running server (e.g., http://127.0.0.1:8765).
        output_dir: Directory to save screenshots.
        config_path: Site config listing the pages to visit.

    Returns:
        Paths of the screenshots written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    with sync_playwright() as p:
        browser = p.chromium.launch()
        page = browser.new_page(viewport={"width": 1280, "height": 800})

        for name, url in _page_urls(server_url, config_path).items():
            output_file = output_dir / f"footer-{name}.png"
            print(f"  Capturing {name}...")
            page.goto(url)
            page.locator("footer.footer").screenshot(path=str(output_file))
            written.append(output_file)
            print(f"  Saved {output_file.name}")

        browser.close()

    return written


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    server_url = argv[0] if argv else "http://127.0.0.1:8765"
    site_root = Path(argv[1]) if len(argv) > 1 else Path.cwd()
    capture_footer_screenshots(server_url, site_root / "local" / "screenshots", site_root / "local" / "config.json")


if __name__ == "__main__":
    main()
