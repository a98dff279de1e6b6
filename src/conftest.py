import os
import pytest
import subprocess
import time
import socket
from contextlib import closing
import sys
from pathlib import Path
import httpx
from playwright.sync_api import sync_playwright

from profilelite.config import load_config
from profilelite.context import RenderContext
from profilelite.theme import Theme

PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_PATH = PROJECT_ROOT / "site" / "local" / "config.json"


# ##################################################################
# find free port
# binds to port 0 to let the os assign an available port
def find_free_port():
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


# ##################################################################
# config path fixture
# points at the bundled example site config
@pytest.fixture(scope="session")
def config_path():
    return CONFIG_PATH


# ##################################################################
# theme fixture
# fresh theme built from the bundled config for each test
@pytest.fixture
def theme(config_path):
    return Theme.from_config(load_config(config_path))


# ##################################################################
# make context fixture
# builds a render context with fixed producers, overridable per test
@pytest.fixture
def make_context():
    def factory(**overrides):
        values = {
            "widget_area_active": False,
            "widgets_plugin_present": False,
            "is_home_template": False,
            "social_menu_registered": True,
            "site_name": "Acme",
            "current_year": 2024,
            "widgets": lambda: '<div class="widget">W</div>',
            "social_menu": lambda: '<ul class="social-icons"><li>S</li></ul>',
        }
        values.update(overrides)
        return RenderContext(**values)

    return factory


# ##################################################################
# server port fixture
# provides a free port for the test server session
@pytest.fixture(scope="session")
def server_port():
    return find_free_port()


# ##################################################################
# server fixture
# starts fastapi server as subprocess and yields url when ready
@pytest.fixture(scope="session")
def server(server_port, config_path):
    env = dict(os.environ)
    env["PROFILELITE_CONFIG"] = str(config_path)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(PROJECT_ROOT / "site" / "src"), str(PROJECT_ROOT), env.get("PYTHONPATH", "")]
    )

    proc = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "src.server:app",
            "--host", "127.0.0.1",
            "--port", str(server_port),
        ],
        cwd=PROJECT_ROOT,
        env=env,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )

    server_url = f"http://127.0.0.1:{server_port}"
    max_attempts = 30
    for _ in range(max_attempts):
        try:
            response = httpx.get(f"{server_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.HTTPError:
            pass
        time.sleep(0.5)
    else:
        proc.terminate()
        raise RuntimeError(f"Server failed to start on port {server_port}")

    yield server_url

    proc.terminate()
    try:
        proc.wait(timeout=3)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait(timeout=2)


# ##################################################################
# shared browser fixture
# single chromium instance reused across browser tests, skipped when absent
@pytest.fixture(scope="session")
def shared_browser():
    pw = sync_playwright().start()
    try:
        browser = pw.chromium.launch(headless=True)
    except Exception as e:
        pw.stop()
        pytest.skip(f"Chromium not available: {e}")
    yield browser
    browser.close()
    pw.stop()
