import threading
import tomllib
from pathlib import Path
from typing import Optional, Set

from pydantic import BaseModel, Field


def get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).resolve().parent.parent


PROJECT_ROOT = get_project_root()

ALL_CAPABILITIES = frozenset({"tabs", "history", "wait", "files", "install"})
SUPPORTED_BROWSERS = ("chrome", "firefox", "edge", "safari")
DEFAULT_SSE_PORT = 8931


class BrowserSettings(BaseModel):
    name: str = Field("chrome", description="Browser to use (chrome, firefox, edge, safari)")
    headless: bool = Field(False, description="Whether to run browser in headless mode")
    executable_path: Optional[str] = Field(
        None, description="Path to the WebDriver executable"
    )
    user_data_dir: Optional[str] = Field(
        None, description="Path to the browser user data directory / profile"
    )
    isolated: bool = Field(
        False, description="Keep browser profile in memory, do not save to disk"
    )
    viewport_width: int = Field(1280, gt=0, description="Viewport width in pixels")
    viewport_height: int = Field(720, gt=0, description="Viewport height in pixels")
    page_load_timeout: float = Field(
        30.0, gt=0, description="Seconds to wait for a page load before failing"
    )
    settle_timeout: float = Field(
        10.0,
        gt=0,
        description="Upper bound in seconds for waits that let the page settle after an action",
    )
    new_tab_timeout: float = Field(
        5.0, gt=0, description="Seconds to wait for a newly opened tab to appear"
    )


class TransportSettings(BaseModel):
    host: str = Field("localhost", description="Host to bind the SSE server to")
    port: Optional[int] = Field(
        None, description="Port for the SSE transport; stdio is used when unset"
    )


class LogSettings(BaseModel):
    level: str = Field("INFO", description="Console (stderr) log level")
    file_level: str = Field("DEBUG", description="Log file level")
    log_dir: Optional[str] = Field(None, description="Directory for log files")


class ServerConfig(BaseModel):
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    transport: TransportSettings = Field(default_factory=TransportSettings)
    log: LogSettings = Field(default_factory=LogSettings)
    capabilities: Set[str] = Field(
        default_factory=lambda: set(ALL_CAPABILITIES),
        description="Capability names gating optional tool groups",
    )
    output_dir: Optional[str] = Field(
        None, description="Directory for screenshots and PDFs"
    )

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities

    @property
    def use_sse(self) -> bool:
        return self.transport.port is not None


class Config:
    _instance = None
    _lock = threading.Lock()
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._config = None
                    self._config_path = None
                    self._initialized = True

    @staticmethod
    def _get_config_path() -> Optional[Path]:
        root = PROJECT_ROOT
        config_path = root / "config" / "config.toml"
        if config_path.exists():
            return config_path
        example_path = root / "config" / "config.example.toml"
        if example_path.exists():
            return example_path
        return None

    @staticmethod
    def _load_config(config_path: Optional[Path]) -> dict:
        if config_path is None:
            return {}
        with config_path.open("rb") as f:
            return tomllib.load(f)

    def load(self, config_path: Optional[Path] = None) -> ServerConfig:
        """(Re)load the configuration, optionally from an explicit file."""
        with self._lock:
            path = config_path or self._get_config_path()
            raw_config = self._load_config(path)

            browser_config = raw_config.get("browser", {})
            # filter valid browser config parameters.
            valid_browser_params = {
                k: v
                for k, v in browser_config.items()
                if k in BrowserSettings.model_fields and v is not None
            }

            server_config = raw_config.get("server", {})
            capabilities = server_config.get("capabilities")

            config_dict = {
                "browser": BrowserSettings(**valid_browser_params),
                "transport": TransportSettings(**raw_config.get("transport", {})),
                "log": LogSettings(**raw_config.get("log", {})),
                "output_dir": server_config.get("output_dir"),
            }
            if capabilities is not None:
                config_dict["capabilities"] = set(capabilities)

            self._config = ServerConfig(**config_dict)
            self._config_path = path
            return self._config

    @property
    def server(self) -> ServerConfig:
        if self._config is None:
            return self.load()
        return self._config

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    @property
    def root_path(self) -> Path:
        """Get the root path of the application"""
        return PROJECT_ROOT


config = Config()
