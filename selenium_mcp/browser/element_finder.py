"""Element lookup with multiple fallback strategies.

A reference is tried against each strategy in a fixed order and the first
candidate that is both displayed and enabled wins:

1. ``element-<N>``: the N-th node (0-based) of a document-order traversal
2. ``text=<value>``: exact text
3. ``partial-text=<value>``: text containing the value
4. ``label=<value>``: first input following a matching label
5. ``placeholder=<value>``
6. ``role=<value>``
7. ``test-id=<value>``
8. the raw reference as an id, a ``data-ref`` value, or free text matched
   against buttons, links, placeholders, labels, ``aria-label`` and ``title``

Positional references are only meaningful for the page state they were
issued from. A DOM mutation in between may make them miss or hit a
different node.
"""

import re
from typing import Callable, List, Optional

from selenium.common.exceptions import (
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from selenium_mcp.exceptions import ElementNotFoundError
from selenium_mcp.utils.logger import logger

POSITIONAL_PATTERN = re.compile(r"^element-([0-9]+)\Z")
TEXT_PATTERN = re.compile(r"^text=(.+)$", re.DOTALL)
PARTIAL_TEXT_PATTERN = re.compile(r"^partial-text=(.+)$", re.DOTALL)
LABEL_PATTERN = re.compile(r"^label=(.+)$", re.DOTALL)
PLACEHOLDER_PATTERN = re.compile(r"^placeholder=(.+)$", re.DOTALL)
ROLE_PATTERN = re.compile(r"^role=(.+)$", re.DOTALL)
TEST_ID_PATTERN = re.compile(r"^test-id=(.+)$", re.DOTALL)


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath string literal.

    XPath 1.0 has no escape syntax, so a value containing both quote kinds
    is assembled with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i < len(parts) - 1:
            pieces.append('"\'"')
    return f"concat({', '.join(pieces)})"


def css_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def is_usable(element: Optional[WebElement]) -> bool:
    """A candidate counts only when it is displayed and enabled."""
    if element is None:
        return False
    try:
        return element.is_displayed() and element.is_enabled()
    except StaleElementReferenceException:
        return False


def _first(driver, by: str, value: str) -> Optional[WebElement]:
    elements = driver.find_elements(by, value)
    return elements[0] if elements else None


def _positional_index(reference: str) -> Optional[int]:
    match = POSITIONAL_PATTERN.match(reference)
    if not match:
        return None
    return int(match.group(1))


def find_by_position(driver, reference: str) -> Optional[WebElement]:
    index = _positional_index(reference)
    if index is None:
        return None
    all_elements = driver.find_elements(By.XPATH, "//*")
    if index < len(all_elements):
        return all_elements[index]
    return None


def _prefixed(pattern: re.Pattern, reference: str) -> Optional[str]:
    match = pattern.match(reference)
    return match.group(1) if match else None


def find_by_text(driver, reference: str) -> Optional[WebElement]:
    text = _prefixed(TEXT_PATTERN, reference)
    if text is None:
        return None
    return _first(driver, By.XPATH, f"//*[text()={xpath_literal(text)}]")


def find_by_partial_text(driver, reference: str) -> Optional[WebElement]:
    text = _prefixed(PARTIAL_TEXT_PATTERN, reference)
    if text is None:
        return None
    return _first(driver, By.XPATH, f"//*[contains(text(),{xpath_literal(text)})]")


def find_by_label(driver, reference: str) -> Optional[WebElement]:
    label = _prefixed(LABEL_PATTERN, reference)
    if label is None:
        return None
    return _first(
        driver,
        By.XPATH,
        f"//label[contains(text(),{xpath_literal(label)})]/following::input[1]",
    )


def find_by_placeholder(driver, reference: str) -> Optional[WebElement]:
    placeholder = _prefixed(PLACEHOLDER_PATTERN, reference)
    if placeholder is None:
        return None
    return _first(driver, By.CSS_SELECTOR, f"[placeholder={css_string(placeholder)}]")


def find_by_role(driver, reference: str) -> Optional[WebElement]:
    role = _prefixed(ROLE_PATTERN, reference)
    if role is None:
        return None
    return _first(driver, By.CSS_SELECTOR, f"[role={css_string(role)}]")


def find_by_test_id(driver, reference: str) -> Optional[WebElement]:
    test_id = _prefixed(TEST_ID_PATTERN, reference)
    if test_id is None:
        return None
    return _first(driver, By.CSS_SELECTOR, f"[data-testid={css_string(test_id)}]")


def _generic_locators(reference: str):
    literal = xpath_literal(reference)
    return [
        (By.ID, reference),
        (By.CSS_SELECTOR, f"[data-ref={css_string(reference)}]"),
        (By.XPATH, f"//button[contains(text(),{literal})]"),
        (By.XPATH, f"//a[contains(text(),{literal})]"),
        (By.XPATH, f"//input[@placeholder={literal}]"),
        (By.XPATH, f"//label[contains(text(),{literal})]/following::input[1]"),
        (By.XPATH, f"//*[@aria-label={literal}]"),
        (By.XPATH, f"//*[@title={literal}]"),
    ]


def find_by_common_selectors(driver, reference: str) -> Optional[WebElement]:
    for by, value in _generic_locators(reference):
        try:
            element = _first(driver, by, value)
            if is_usable(element):
                return element
        except WebDriverException as e:
            logger.debug(f"Selector {value!r} failed: {e.msg}")
    return None


STRATEGIES: List[Callable[..., Optional[WebElement]]] = [
    find_by_position,
    find_by_text,
    find_by_partial_text,
    find_by_label,
    find_by_placeholder,
    find_by_role,
    find_by_test_id,
    find_by_common_selectors,
]


def find_element(driver, reference: str) -> WebElement:
    """Resolve ``reference`` to a displayed and enabled element.

    Raises:
        ElementNotFoundError: when every strategy is exhausted.
    """
    logger.debug(f"Finding element with reference: {reference}")
    for strategy in STRATEGIES:
        try:
            element = strategy(driver, reference)
            if is_usable(element):
                logger.debug(f"Found element using strategy: {strategy.__name__}")
                return element
        except WebDriverException as e:
            logger.debug(f"Strategy {strategy.__name__} failed: {e.msg}")
    raise ElementNotFoundError(reference)


def find_elements(driver, reference: str) -> List[WebElement]:
    """Collect every positional, exact-text and generic match.

    Matches are not deduplicated across strategies and are not filtered for
    visibility.
    """
    logger.debug(f"Finding elements with reference: {reference}")
    elements: List[WebElement] = []

    try:
        index = _positional_index(reference)
        if index is not None:
            all_elements = driver.find_elements(By.XPATH, "//*")
            if index < len(all_elements):
                elements.append(all_elements[index])
    except WebDriverException as e:
        logger.debug(f"Positional strategy failed: {e.msg}")

    text = _prefixed(TEXT_PATTERN, reference)
    if text is not None:
        try:
            elements.extend(
                driver.find_elements(By.XPATH, f"//*[text()={xpath_literal(text)}]")
            )
        except WebDriverException as e:
            logger.debug(f"Text strategy failed: {e.msg}")

    for by, value in _generic_locators(reference):
        try:
            elements.extend(driver.find_elements(by, value))
        except WebDriverException as e:
            logger.debug(f"Selector {value!r} failed: {e.msg}")

    return elements


def scroll_into_view(driver, element: WebElement):
    driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)
