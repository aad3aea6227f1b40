"""Accessibility-style snapshot of the current page."""

from selenium_mcp.browser.waits import wait_for_document_ready
from selenium_mcp.tool.base import BaseTool, ToolResult
from selenium_mcp.utils.logger import logger

_SNAPSHOT_DESCRIPTION = (
    "Capture accessibility snapshot of the current page, this is better than screenshot"
)

# Refs are positions in document.getElementsByTagName('*'), the same
# document order the element resolver uses for element-<N> references.
_SNAPSHOT_SCRIPT = """
const all = Array.from(document.getElementsByTagName('*'));
const refs = new Map();
all.forEach((el, i) => refs.set(el, 'element-' + i));
const ATTRIBUTES = ['id', 'class', 'href', 'src', 'alt', 'title', 'value',
    'placeholder', 'type', 'name', 'role', 'aria-label'];

function visit(el) {
    const node = {type: el.tagName.toLowerCase(), ref: refs.get(el)};
    const text = (el.innerText || '').trim();
    if (text) {
        node.name = text;
    }
    const attributes = {};
    for (const attr of ATTRIBUTES) {
        const value = el.getAttribute(attr);
        if (value) {
            attributes[attr] = value;
        }
    }
    node.attributes = attributes;
    const rect = el.getBoundingClientRect();
    node.position = {
        x: Math.round(rect.x), y: Math.round(rect.y),
        width: Math.round(rect.width), height: Math.round(rect.height)
    };
    const children = Array.from(el.children).filter(c => refs.has(c)).map(visit);
    if (children.length) {
        node.children = children;
    }
    return node;
}

const root = {type: 'root', name: 'Document', ref: 'root', children: []};
if (document.body) {
    root.children.push(visit(document.body));
}
return root;
"""


class BrowserSnapshot(BaseTool):
    name: str = "browser_snapshot"
    title: str = "Page snapshot"
    description: str = _SNAPSHOT_DESCRIPTION
    read_only: bool = True

    def execute_impl(self, params, browser) -> ToolResult:
        driver = browser.get_driver()
        if not wait_for_document_ready(driver, browser.settings.settle_timeout):
            logger.warning("Page load timeout, proceeding with snapshot anyway")

        return ToolResult(
            url=driver.current_url,
            title=driver.title,
            snapshot=driver.execute_script(_SNAPSHOT_SCRIPT),
        )
