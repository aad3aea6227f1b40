"""Capability-gated tool groups."""

from typing import Iterable, List, Optional

from selenium_mcp.config import ALL_CAPABILITIES
from selenium_mcp.tool.base import BaseTool
from selenium_mcp.tool.browser import (
    BrowserClose,
    BrowserConsoleMessages,
    BrowserFrameSwitch,
    BrowserNetworkRequests,
    BrowserResize,
    BrowserSnapshot,
    BrowserTakeScreenshot,
)
from selenium_mcp.tool.files import BrowserFileUpload
from selenium_mcp.tool.interaction import (
    BrowserClick,
    BrowserDrag,
    BrowserHandleDialog,
    BrowserHover,
    BrowserPressKey,
    BrowserSelectOption,
    BrowserType,
    BrowserWaitFor,
)
from selenium_mcp.tool.navigation import (
    BrowserNavigate,
    BrowserNavigateBack,
    BrowserNavigateForward,
)
from selenium_mcp.tool.tabs import (
    BrowserTabClose,
    BrowserTabList,
    BrowserTabNew,
    BrowserTabSelect,
)
from selenium_mcp.tool.tool_collection import ToolCollection
from selenium_mcp.tool.utility import BrowserInstall, BrowserPdfSave
from selenium_mcp.utils.logger import logger


def browser_tools() -> List[BaseTool]:
    return [
        BrowserSnapshot(),
        BrowserTakeScreenshot(),
        BrowserClose(),
        BrowserResize(),
        BrowserConsoleMessages(),
        BrowserNetworkRequests(),
        BrowserFrameSwitch(),
    ]


def navigation_tools() -> List[BaseTool]:
    return [BrowserNavigate(), BrowserNavigateBack(), BrowserNavigateForward()]


def interaction_tools() -> List[BaseTool]:
    return [
        BrowserClick(),
        BrowserHover(),
        BrowserType(),
        BrowserDrag(),
        BrowserSelectOption(),
        BrowserPressKey(),
        BrowserWaitFor(),
        BrowserHandleDialog(),
    ]


def utility_tools() -> List[BaseTool]:
    return [BrowserPdfSave()]


def tab_tools() -> List[BaseTool]:
    return [BrowserTabList(), BrowserTabNew(), BrowserTabSelect(), BrowserTabClose()]


def file_tools() -> List[BaseTool]:
    return [BrowserFileUpload()]


def install_tools() -> List[BaseTool]:
    return [BrowserInstall()]


# "history" and "wait" are accepted but gate nothing: back/forward and
# wait_for are part of the always-on groups.
GATED_GROUPS = {
    "tabs": tab_tools,
    "files": file_tools,
    "install": install_tools,
}


def create_tool_collection(capabilities: Optional[Iterable[str]] = None) -> ToolCollection:
    """Build the registry for a capability set; ``None`` enables everything."""
    enabled = set(ALL_CAPABILITIES if capabilities is None else capabilities)
    unknown = enabled - ALL_CAPABILITIES
    if unknown:
        logger.warning(f"Ignoring unknown capabilities: {', '.join(sorted(unknown))}")

    tools = ToolCollection()
    tools.add_tools(
        *browser_tools(), *navigation_tools(), *interaction_tools(), *utility_tools()
    )
    for capability, group in GATED_GROUPS.items():
        if capability in enabled:
            tools.add_tools(*group())

    logger.debug(f"Registered {len(tools)} tools for capabilities {sorted(enabled)}")
    return tools
