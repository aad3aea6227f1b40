"""Bounded condition waits used after actions that change page state."""

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from selenium_mcp.utils.logger import logger

POLL_FREQUENCY = 0.1


def _document_ready(driver) -> bool:
    try:
        return driver.execute_script("return document.readyState") == "complete"
    except WebDriverException:
        return False


def wait_for_document_ready(driver, timeout: float) -> bool:
    """Wait until ``document.readyState`` is ``complete``.

    Returns False instead of raising when the timeout elapses.
    """
    try:
        WebDriverWait(driver, timeout, poll_frequency=POLL_FREQUENCY).until(
            _document_ready
        )
        return True
    except TimeoutException:
        logger.debug(f"Document not ready after {timeout}s")
        return False


def _body_text(driver) -> str:
    return driver.execute_script("return document.body ? document.body.innerText : '';") or ""


def wait_for_text(driver, text: str, timeout: float) -> bool:
    """Wait until ``text`` appears anywhere in the page body."""
    try:
        WebDriverWait(driver, timeout, poll_frequency=POLL_FREQUENCY).until(
            lambda d: text in _body_text(d)
        )
        return True
    except TimeoutException:
        return False


def wait_for_text_gone(driver, text: str, timeout: float) -> bool:
    """Wait until ``text`` is no longer present in the page body."""
    try:
        WebDriverWait(driver, timeout, poll_frequency=POLL_FREQUENCY).until_not(
            lambda d: text in _body_text(d)
        )
        return True
    except TimeoutException:
        return False


def wait_for_alert(driver, timeout: float):
    """Return the open alert, or None when no dialog shows up in time."""
    try:
        return WebDriverWait(driver, timeout, poll_frequency=POLL_FREQUENCY).until(
            EC.alert_is_present()
        )
    except TimeoutException:
        return None
