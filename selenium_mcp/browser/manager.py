"""Browser session lifecycle: one lazily created driver and its tabs."""

import threading
from typing import Callable, Dict, List, Optional

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support.ui import WebDriverWait

from selenium_mcp.browser.drivers import create_driver
from selenium_mcp.config import BrowserSettings, ServerConfig
from selenium_mcp.exceptions import InvalidTabIndexError
from selenium_mcp.utils.logger import logger

NEW_TAB_SCRIPT = "window.open(arguments[0], '_blank');"


class BrowserManager:
    """Owns the WebDriver, the ordered tab handles and the current tab index.

    The session is either closed (no driver) or open, in which case ``_tabs``
    holds at least one handle and ``_current_index`` points into it. Every
    public method runs under one re-entrant lock so that concurrent tool
    calls never observe a half-updated tab list.
    """

    def __init__(
        self,
        config: ServerConfig,
        driver_factory: Callable[[BrowserSettings], object] = create_driver,
    ):
        self.config = config
        self._driver_factory = driver_factory
        self._driver = None
        self._tabs: List[str] = []
        self._current_index = 0
        self._lock = threading.RLock()

    @property
    def settings(self) -> BrowserSettings:
        return self.config.browser

    @property
    def is_open(self) -> bool:
        with self._lock:
            return self._driver is not None

    def get_driver(self):
        """Return the driver, creating the session on first use."""
        with self._lock:
            if self._driver is None:
                self._create_session()
            return self._driver

    def _create_session(self):
        driver = self._driver_factory(self.settings)
        try:
            driver.set_window_size(
                self.settings.viewport_width, self.settings.viewport_height
            )
        except WebDriverException as e:
            logger.warning(f"Failed to apply viewport size: {e.msg}")
        self._driver = driver
        self._tabs = [driver.current_window_handle]
        self._current_index = 0
        logger.info("Browser session opened")

    def _check_index(self, index: int):
        if not isinstance(index, int) or index < 0 or index >= len(self._tabs):
            raise InvalidTabIndexError(index, len(self._tabs))

    def get_current_tab_index(self) -> int:
        with self._lock:
            return self._current_index

    def get_open_tabs(self) -> List[str]:
        with self._lock:
            return list(self._tabs)

    def describe_tabs(self) -> List[Dict]:
        """Index, URL, title and current flag of every open tab."""
        with self._lock:
            driver = self.get_driver()
            current_handle = self._tabs[self._current_index]
            tabs = []
            try:
                for i, handle in enumerate(self._tabs):
                    driver.switch_to.window(handle)
                    tabs.append(
                        {
                            "index": i,
                            "url": driver.current_url,
                            "title": driver.title,
                            "current": i == self._current_index,
                        }
                    )
            finally:
                driver.switch_to.window(current_handle)
            return tabs

    def open_new_tab(self, url: Optional[str] = None) -> bool:
        """Open a tab and focus it.

        The driver has no new-tab primitive, so the tab is opened from
        script and discovered by diffing the window-handle set. Returns False
        when no new handle shows up in time (blocked popup); the original
        tab stays focused in that case.
        """
        with self._lock:
            driver = self.get_driver()
            current_handle = driver.current_window_handle
            known = set(self._tabs)

            driver.execute_script(NEW_TAB_SCRIPT, url or "about:blank")

            try:
                WebDriverWait(driver, self.settings.new_tab_timeout).until(
                    lambda d: any(h not in known for h in d.window_handles)
                )
            except TimeoutException:
                logger.warning("New tab did not appear; staying on the current tab")
                driver.switch_to.window(current_handle)
                return False

            for handle in driver.window_handles:
                if handle not in known:
                    self._tabs.append(handle)
                    driver.switch_to.window(handle)
                    self._current_index = len(self._tabs) - 1
                    return True

            driver.switch_to.window(current_handle)
            return False

    def switch_to_tab(self, index: int):
        with self._lock:
            driver = self.get_driver()
            self._check_index(index)
            driver.switch_to.window(self._tabs[index])
            self._current_index = index

    def close_tab(self, index: Optional[int] = None) -> int:
        """Close the tab at ``index`` (the current tab when None) and return its index."""
        with self._lock:
            driver = self.get_driver()
            if index is None:
                index = self._current_index
            self._check_index(index)

            if index == self._current_index:
                driver.switch_to.window(self._tabs[index])
                driver.close()
                self._tabs.pop(index)

                if self._tabs:
                    new_index = min(index, len(self._tabs) - 1)
                    driver.switch_to.window(self._tabs[new_index])
                    self._current_index = new_index
                else:
                    logger.info("Last tab closed, starting a fresh browser session")
                    self._teardown()
                    self._create_session()
                return index

            current_handle = self._tabs[self._current_index]
            driver.switch_to.window(self._tabs[index])
            driver.close()
            self._tabs.pop(index)
            if index < self._current_index:
                self._current_index -= 1
            driver.switch_to.window(current_handle)
            return index

    def _teardown(self):
        driver = self._driver
        try:
            if driver is not None:
                driver.quit()
        except Exception as e:
            logger.error(f"Error closing WebDriver: {e}")
        finally:
            self._driver = None
            self._tabs = []
            self._current_index = 0

    def close(self):
        """Quit the browser. Failures are logged; state is always cleared."""
        with self._lock:
            if self._driver is not None:
                self._teardown()
                logger.info("Browser session closed")
