"""Shared JSON codec used by the dispatcher and tools."""

import json
from typing import Any


class JsonCodec:
    """Stateless JSON encoder/decoder.

    One instance is shared process-wide; it holds no mutable state so no
    lifecycle management is needed.
    """

    def encode(self, value: Any) -> str:
        """Compact ASCII-only JSON; non-ASCII characters are escaped."""
        return json.dumps(value, separators=(",", ":"))

    def decode(self, text: str) -> Any:
        return json.loads(text)


json_codec = JsonCodec()
