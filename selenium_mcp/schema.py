"""Envelope models exchanged with the orchestrator."""

import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from selenium_mcp.codec import json_codec
from selenium_mcp.exceptions import EnvelopeError


class MessageType:
    INITIALIZE = "initialize"
    TOOL_CALL = "toolCall"
    TOOL_CALL_RESULT = "toolCallResult"
    ERROR = "error"
    READY = "ready"


class Request(BaseModel):
    """Inbound envelope. Only ``type`` is mandatory at parse time."""

    model_config = ConfigDict(extra="ignore")

    type: str
    id: Optional[str] = None
    name: Optional[str] = None
    params: Optional[Dict[str, Any]] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise ValueError("id must be a string or a number")
        if isinstance(value, (int, float)):
            return str(value)
        raise ValueError("id must be a string or a number")

    @field_validator("params", mode="before")
    @classmethod
    def default_params(cls, value):
        return {} if value is None else value

    @classmethod
    def parse(cls, raw: str) -> "Request":
        try:
            data = json_codec.decode(raw)
        except ValueError as e:
            raise EnvelopeError(f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise EnvelopeError("Message must be a JSON object")
        if "type" not in data:
            raise EnvelopeError("Message is missing the 'type' field")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise EnvelopeError(f"Invalid message: {e.errors()[0]['msg']}") from e


class Envelope(BaseModel):
    def to_json(self) -> str:
        return json_codec.encode(self.model_dump(exclude_none=True))


class ServerInfo(BaseModel):
    name: str
    version: str


class ToolDescriptor(BaseModel):
    name: str
    title: str
    description: str
    readOnly: bool
    parameterSchema: Dict[str, Any]


class InitializeResult(Envelope):
    type: Literal["initialize"] = MessageType.INITIALIZE
    id: str
    serverInfo: ServerInfo
    tools: List[ToolDescriptor]


class ErrorDetail(BaseModel):
    message: str


class ToolCallResult(Envelope):
    type: Literal["toolCallResult"] = MessageType.TOOL_CALL_RESULT
    id: str
    result: Optional[Dict[str, Any]] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def success(cls, request_id: str, result: Dict[str, Any]) -> "ToolCallResult":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: str, message: str) -> "ToolCallResult":
        return cls(id=request_id, error=ErrorDetail(message=message))


class ErrorMessage(Envelope):
    """Out-of-band error, not tied to a request."""

    type: Literal["error"] = MessageType.ERROR
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    message: str


class Ready(Envelope):
    type: Literal["ready"] = MessageType.READY
