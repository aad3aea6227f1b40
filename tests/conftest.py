import itertools

import pytest
from selenium.common.exceptions import (
    ElementNotInteractableException,
    NoAlertPresentException,
    NoSuchElementException,
    NoSuchWindowException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.remote.webelement import WebElement

from selenium_mcp.browser.manager import BrowserManager
from selenium_mcp.config import BrowserSettings, ServerConfig


class FakeElement(WebElement):
    """A WebElement that never talks to a browser.

    ``fail`` names methods that raise a driver error when called.
    ``children`` maps ``(by, value)`` to the elements found under this one.
    """

    _ids = itertools.count()

    def __init__(
        self,
        name="element",
        displayed=True,
        enabled=True,
        stale=False,
        tag="div",
        attributes=None,
        fail=(),
    ):
        super().__init__(None, f"fake-element-{next(self._ids)}")
        self.name = name
        self.displayed = displayed
        self.enabled = enabled
        self.stale = stale
        self.tag = tag
        self.attributes = dict(attributes or {})
        self.fail = set(fail)
        self.children = {}
        self.selected = False
        self.clicks = 0
        self.cleared = False
        self.sent_keys = []

    def _check(self, method):
        if self.stale:
            raise StaleElementReferenceException("stale")
        if method in self.fail:
            raise ElementNotInteractableException(f"{method} failed on {self.name}")

    @property
    def tag_name(self):
        return self.tag

    @property
    def text(self):
        return self.name

    def is_displayed(self):
        self._check("is_displayed")
        return self.displayed

    def is_enabled(self):
        self._check("is_enabled")
        return self.enabled

    def is_selected(self):
        return self.selected

    def click(self):
        self._check("click")
        self.clicks += 1
        self.selected = not self.selected

    def clear(self):
        self._check("clear")
        self.cleared = True

    def send_keys(self, *values):
        self._check("send_keys")
        self.sent_keys.extend(values)

    def get_attribute(self, name):
        return self.attributes.get(name)

    def get_dom_attribute(self, name):
        return self.attributes.get(name)

    def value_of_css_property(self, property_name):
        return ""

    def find_elements(self, by="id", value=None):
        return list(self.children.get((by, value), []))

    def __repr__(self):
        return f"FakeElement({self.name!r})"


class FakeSwitchTo:
    def __init__(self, driver):
        self._driver = driver
        self.frames = []
        self.open_alert = None

    @property
    def alert(self):
        if self.open_alert is None:
            raise NoAlertPresentException("no alert open")
        return self.open_alert

    def window(self, handle):
        if handle not in self._driver.handles:
            raise NoSuchWindowException(f"no such window: {handle}")
        self._driver.current = handle

    def frame(self, reference):
        self.frames.append(reference)

    def default_content(self):
        self.frames.append("default")

    def parent_frame(self):
        self.frames.append("parent")


class FakeDriver:
    """Just enough of a WebDriver for the session manager and the tools."""

    _ids = itertools.count()

    def __init__(self, block_popups=False, fail_quit=False):
        self.id = next(self._ids)
        first = self._new_handle()
        self.handles = [first]
        self.current = first
        self.urls = {first: "about:blank"}
        self.titles = {}
        self.block_popups = block_popups
        self.fail_quit = fail_quit
        self.quit_count = 0
        self.closed_handles = []
        self.scripts = []
        self.executed = []
        self.action_error = None
        self.script_results = {}
        self.locators = {}
        self.window_size = None
        self.page_load_timeout = None
        self.switch_to = FakeSwitchTo(self)
        self.browser_log = []
        self.screenshot = b""
        self.pdf = None

    def _new_handle(self):
        return f"window-{self.id}-{next(self._ids)}"

    @property
    def window_handles(self):
        return list(self.handles)

    @property
    def current_window_handle(self):
        if self.current not in self.handles:
            raise NoSuchWindowException("current window is closed")
        return self.current

    @property
    def current_url(self):
        return self.urls.get(self.current, "about:blank")

    @property
    def title(self):
        return self.titles.get(self.current, "")

    def get(self, url):
        self.urls[self.current] = url

    def back(self):
        pass

    def forward(self):
        pass

    def set_window_size(self, width, height):
        self.window_size = (width, height)

    def set_page_load_timeout(self, timeout):
        self.page_load_timeout = timeout

    def execute_script(self, script, *args):
        self.scripts.append((script, args))
        if "window.open" in script:
            if not self.block_popups:
                handle = self._new_handle()
                self.handles.append(handle)
                self.urls[handle] = args[0] if args else "about:blank"
            return None
        if "document.readyState" in script:
            return "complete"
        for fragment, result in self.script_results.items():
            if fragment in script:
                if isinstance(result, Exception):
                    raise result
                return result
        return None

    def execute(self, command, params=None):
        """Records W3C commands such as the ones ActionChains performs."""
        self.executed.append((command, params))
        if self.action_error is not None:
            raise self.action_error
        return {"value": None}

    def find_elements(self, by, value):
        result = self.locators.get((by, value), [])
        if isinstance(result, Exception):
            raise result
        return list(result)

    def find_element(self, by, value):
        elements = self.find_elements(by, value)
        if not elements:
            raise NoSuchElementException(f"{by}={value}")
        return elements[0]

    def close(self):
        self.handles.remove(self.current)
        self.closed_handles.append(self.current)

    def quit(self):
        self.quit_count += 1
        if self.fail_quit:
            raise WebDriverException("quit failed")

    def get_log(self, log_type):
        return list(self.browser_log)

    def get_screenshot_as_png(self):
        return self.screenshot

    def print_page(self, options):
        if self.pdf is None:
            raise WebDriverException("print not supported")
        self.print_options = options
        return self.pdf


class DriverFactory:
    """Creates a fresh FakeDriver per session and remembers each one."""

    def __init__(self, **driver_kwargs):
        self.driver_kwargs = driver_kwargs
        self.drivers = []
        self.settings = []

    def __call__(self, settings):
        self.settings.append(settings)
        driver = FakeDriver(**self.driver_kwargs)
        self.drivers.append(driver)
        return driver

    @property
    def calls(self):
        return len(self.drivers)

    @property
    def last(self):
        return self.drivers[-1]


@pytest.fixture
def server_config(tmp_path):
    return ServerConfig(
        browser=BrowserSettings(
            headless=True,
            isolated=True,
            settle_timeout=0.5,
            new_tab_timeout=0.2,
        ),
        output_dir=str(tmp_path),
    )


@pytest.fixture
def driver_factory():
    return DriverFactory()


@pytest.fixture
def browser(server_config, driver_factory):
    manager = BrowserManager(server_config, driver_factory=driver_factory)
    yield manager
    manager.close()


@pytest.fixture
def driver(browser, driver_factory):
    browser.get_driver()
    return driver_factory.last


def performed_actions(driver, device_type):
    """Flattened W3C actions sent for one input source type ("pointer" or "key")."""
    return [
        action
        for _, params in driver.executed
        for device in params["actions"]
        if device["type"] == device_type
        for action in device["actions"]
    ]
