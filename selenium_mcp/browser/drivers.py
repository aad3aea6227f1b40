"""WebDriver factory per browser kind."""

import platform
from pathlib import Path
from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.safari.options import Options as SafariOptions
from selenium.webdriver.safari.service import Service as SafariService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from selenium_mcp.config import SUPPORTED_BROWSERS, BrowserSettings
from selenium_mcp.exceptions import UnsupportedBrowserError
from selenium_mcp.utils.logger import logger

DEFAULT_BROWSER = "chrome"


def normalize_browser_name(name: Optional[str]) -> str:
    browser_name = (name or DEFAULT_BROWSER).strip().lower()
    if browser_name not in SUPPORTED_BROWSERS:
        logger.warning(f"Unknown browser: {browser_name}. Using Chrome instead.")
        return DEFAULT_BROWSER
    return browser_name


def default_user_data_dir(browser_name: str) -> Path:
    """Per-user profile directory used when the session is not isolated."""
    system = platform.system()
    home = Path.home()
    dir_name = f"selenium-mcp-{browser_name}-profile"
    if system == "Windows":
        return home / "AppData" / "Local" / "selenium-mcp" / dir_name
    if system == "Darwin":
        return home / "Library" / "Caches" / "selenium-mcp" / dir_name
    return home / ".cache" / "selenium-mcp" / dir_name


def install_driver(browser_name: str) -> str:
    """Download (or reuse the cached) driver binary and return its path."""
    browser_name = normalize_browser_name(browser_name)
    if browser_name == "chrome":
        return ChromeDriverManager().install()
    if browser_name == "firefox":
        return GeckoDriverManager().install()
    if browser_name == "edge":
        return EdgeChromiumDriverManager().install()
    if platform.system() != "Darwin":
        raise UnsupportedBrowserError("Safari is only available on macOS")
    # safaridriver ships with the operating system
    return "/usr/bin/safaridriver"


def _chromium_arguments(options, settings: BrowserSettings, browser_name: str):
    if settings.headless:
        options.add_argument("--headless=new")

    if settings.user_data_dir:
        options.add_argument(f"--user-data-dir={settings.user_data_dir}")
    elif not settings.isolated:
        options.add_argument(
            f"--user-data-dir={default_user_data_dir(browser_name).resolve()}"
        )

    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    return options


def _create_chrome(settings: BrowserSettings):
    options = _chromium_arguments(ChromeOptions(), settings, "chrome")
    path = settings.executable_path or ChromeDriverManager().install()
    return webdriver.Chrome(service=ChromeService(path), options=options)


def _create_edge(settings: BrowserSettings):
    options = _chromium_arguments(EdgeOptions(), settings, "edge")
    path = settings.executable_path or EdgeChromiumDriverManager().install()
    return webdriver.Edge(service=EdgeService(path), options=options)


def _create_firefox(settings: BrowserSettings):
    options = FirefoxOptions()
    if settings.headless:
        options.add_argument("-headless")

    user_data_dir = settings.user_data_dir
    if user_data_dir or not settings.isolated:
        # Firefox takes a profile directory instead of --user-data-dir
        if not user_data_dir:
            user_data_dir = str(default_user_data_dir("firefox").resolve())
        options.add_argument("-profile")
        options.add_argument(user_data_dir)

    path = settings.executable_path or GeckoDriverManager().install()
    return webdriver.Firefox(service=FirefoxService(path), options=options)


def _create_safari(settings: BrowserSettings):
    # Safari supports neither headless mode nor a custom profile
    options = SafariOptions()
    if settings.executable_path:
        return webdriver.Safari(
            service=SafariService(settings.executable_path), options=options
        )
    return webdriver.Safari(options=options)


_FACTORIES = {
    "chrome": _create_chrome,
    "firefox": _create_firefox,
    "edge": _create_edge,
    "safari": _create_safari,
}


def create_driver(settings: BrowserSettings):
    """Create a WebDriver for ``settings.name``, falling back to Chrome."""
    browser_name = normalize_browser_name(settings.name)
    logger.info(f"Creating {browser_name} WebDriver (headless: {settings.headless})")
    driver = _FACTORIES[browser_name](settings)
    driver.set_page_load_timeout(settings.page_load_timeout)
    return driver
