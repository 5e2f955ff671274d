"""Custom JSON encoding utilities"""
import json
from typing import Any, Iterable

class ScriptSafeEncoder(json.JSONEncoder):
    """JSON encoder whose output can be embedded inside an HTML <script> block"""

    def encode(self, obj):
        # \u escapes decode back to the same characters in JavaScript
        return (
            super().encode(obj)
            .replace("&", "\\u0026")
            .replace("<", "\\u003c")
            .replace(">", "\\u003e")
        )

def json_dumps(obj: Any) -> str:
    """Helper function to dump JSON safe for inline scripts"""
    return json.dumps(obj, cls=ScriptSafeEncoder, ensure_ascii=False)

def json_array(values: Iterable[Any]) -> str:
    """Serialize values as a JSON array"""
    return json_dumps(list(values))
