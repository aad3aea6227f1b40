from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from selenium_mcp.exceptions import ToolError


class ToolResult(BaseModel):
    """Represents the result of a tool execution.

    Tools attach whatever fields their result needs; ``None`` values are
    dropped on the wire.
    """

    model_config = ConfigDict(extra="allow")

    message: Optional[str] = Field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def __str__(self):
        return self.message or ""


def success_response(message: Optional[str] = None, **extra) -> ToolResult:
    """Create a success response."""
    return ToolResult(message=message, **extra)


# Parameter schema builder


def _param(name: str, schema: dict, required: bool) -> dict:
    return {"name": name, "schema": schema, "required": required}


def string_param(name: str, description: str, required: bool = False, **extra) -> dict:
    return _param(name, {"type": "string", "description": description, **extra}, required)


def number_param(name: str, description: str, required: bool = False, **extra) -> dict:
    return _param(name, {"type": "number", "description": description, **extra}, required)


def integer_param(name: str, description: str, required: bool = False, **extra) -> dict:
    return _param(name, {"type": "integer", "description": description, **extra}, required)


def boolean_param(name: str, description: str, required: bool = False) -> dict:
    return _param(name, {"type": "boolean", "description": description}, required)


def array_param(
    name: str, description: str, item_type: str = "string", required: bool = False
) -> dict:
    return _param(
        name,
        {"type": "array", "items": {"type": item_type}, "description": description},
        required,
    )


def build_schema(*params: dict) -> dict:
    """Assemble a JSON-schema object from ``*_param`` specs."""
    schema = {
        "type": "object",
        "properties": {p["name"]: p["schema"] for p in params},
    }
    required = [p["name"] for p in params if p["required"]]
    if required:
        schema["required"] = required
    return schema


# Parameter checks shared by tool validators


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_string(params: dict, name: str) -> str:
    value = params.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ToolError(f"Parameter '{name}' is required and must be a non-empty string")
    return value


def optional_string(params: dict, name: str) -> Optional[str]:
    value = params.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ToolError(f"Parameter '{name}' must be a string")
    return value


def require_number(params: dict, name: str) -> float:
    value = params.get(name)
    if not _is_number(value):
        raise ToolError(f"Parameter '{name}' is required and must be a number")
    return value


def optional_number(params: dict, name: str) -> Optional[float]:
    value = params.get(name)
    if value is None:
        return None
    if not _is_number(value):
        raise ToolError(f"Parameter '{name}' must be a number")
    return value


def _as_index(name: str, value) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ToolError(f"Parameter '{name}' must be a non-negative integer")
    return value


def require_index(params: dict, name: str) -> int:
    if params.get(name) is None:
        raise ToolError(f"Parameter '{name}' is required")
    return _as_index(name, params[name])


def optional_index(params: dict, name: str) -> Optional[int]:
    if params.get(name) is None:
        return None
    return _as_index(name, params[name])


def require_boolean(params: dict, name: str) -> bool:
    value = params.get(name)
    if not isinstance(value, bool):
        raise ToolError(f"Parameter '{name}' is required and must be a boolean")
    return value


def optional_boolean(params: dict, name: str, default: bool = False) -> bool:
    value = params.get(name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ToolError(f"Parameter '{name}' must be a boolean")
    return value


def require_string_list(params: dict, name: str) -> List[str]:
    value = params.get(name)
    if not isinstance(value, list) or not value:
        raise ToolError(f"Parameter '{name}' is required and must be a non-empty array")
    if not all(isinstance(v, str) for v in value):
        raise ToolError(f"Parameter '{name}' must only contain strings")
    return value


def require_element(params: dict, element_key: str = "element", ref_key: str = "ref"):
    """Both the human-readable description and the exact reference are required."""
    return require_string(params, element_key), require_string(params, ref_key)


class BaseTool(ABC, BaseModel):
    """One remotely callable browser operation.

    ``execute`` is a two-step template: ``validate`` runs before any side
    effect, then ``execute_impl`` does the work. Both report failures by
    raising; the dispatcher turns them into tool-level errors.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    title: str
    description: str
    read_only: bool = False
    parameters: dict = Field(default_factory=lambda: build_schema())

    def execute(self, params: Dict[str, Any], browser) -> ToolResult:
        self.validate(params)
        return self.execute_impl(params, browser)

    def validate(self, params: Dict[str, Any]) -> None:
        """Check parameters before touching the browser. No-op by default."""

    @abstractmethod
    def execute_impl(self, params: Dict[str, Any], browser) -> ToolResult:
        """Execute the tool against the browser session."""

    def to_descriptor(self) -> Dict[str, Any]:
        """Descriptor advertised in the ``initialize`` response."""
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "readOnly": self.read_only,
            "parameterSchema": self.parameters,
        }
