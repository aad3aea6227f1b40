from selenium.common.exceptions import NoSuchElementException


class SeleniumMCPError(Exception):
    """Base exception for all selenium-mcp errors"""


class ToolError(SeleniumMCPError):
    """Raised when a tool encounters an error."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UnknownToolError(ToolError):
    """Raised when a tool call names a tool that is not registered"""

    def __init__(self, name):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnsupportedBrowserError(ToolError):
    """Raised when the active browser cannot perform an operation"""


class InvalidTabIndexError(SeleniumMCPError, ValueError):
    """Raised when a tab index is outside the open tab list"""

    def __init__(self, index, tab_count):
        super().__init__(
            f"Invalid tab index: {index}. Only {tab_count} tabs are open."
        )
        self.index = index
        self.tab_count = tab_count


class EnvelopeError(SeleniumMCPError):
    """Raised when an inbound message is not a valid envelope"""


class ElementNotFoundError(NoSuchElementException):
    """Raised when no resolution strategy yields a usable element"""

    def __init__(self, reference):
        super().__init__(f"Could not find element with reference: {reference}")
        self.reference = reference
