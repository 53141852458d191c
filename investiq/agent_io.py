"""
I/O helpers for schemas and message construction.

PURPOSE: Central place for JSON schema validation and message formatting used across
         the InvestIQ agent, pipeline and Lambda handler.
CONTEXT: Schemas ship inside the package (investiq/schemas) so validation does not
         depend on the current working directory.
"""

from __future__ import annotations

import json
import pathlib
from functools import lru_cache
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

SCHEMA_DIR = pathlib.Path(__file__).resolve().parent / "schemas"


# -------------------- Schema loading utilities -------------------- #

@lru_cache(maxsize=64)
def _load_schema_cached(abs_path: str) -> Dict[str, Any]:
    """
    Read and parse a JSON schema file, caching it to avoid repeated disk I/O.

    parameters:
    - abs_path: str – full absolute path to the schema file.

    returns:
    - dict – parsed JSON schema content.
    """
    p = pathlib.Path(abs_path)
    text = p.read_text(encoding="utf-8")
    return json.loads(text)


def load_schema(name: str) -> Dict[str, Any]:
    """
    Load a JSON schema by file name from the package schema directory (with caching).

    parameters:
    - name: str – file name (e.g. "advice_request.schema.json") or a path.

    returns:
    - dict – schema as a Python dictionary.

    raises:
    - FileNotFoundError – if the file cannot be located.
    - json.JSONDecodeError – if the file is not valid JSON.

    notes:
    - Falls back to the name as a path (relative to the working directory).
    """
    p = SCHEMA_DIR / pathlib.Path(name).name
    if not p.exists():
        alt = pathlib.Path(name)
        if not alt.exists():
            raise FileNotFoundError(f"Schema not found at: {name}")
        p = alt
    return _load_schema_cached(str(p.resolve()))


# -------------------- Validation helpers -------------------- #

def validate_with_schema(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    """
    Validate a given instance against a provided schema.

    raises:
    - ValidationError – if instance fails to meet schema requirements.
    """
    Draft7Validator(schema).validate(instance)


def validate_advice_request(payload: Dict[str, Any]) -> None:
    """Validate an advice request (profile + options + optional catalog)."""
    validate_with_schema(payload, load_schema("advice_request.schema.json"))


def validate_advice_output(result: Dict[str, Any]) -> None:
    """Validate the pipeline output shape before it leaves the service."""
    validate_with_schema(result, load_schema("advice_output.schema.json"))


# -------------------- Message construction helpers -------------------- #

def make_ok_message(content: str) -> Dict[str, str]:
    """Create an assistant-style message (role='assistant')."""
    return {"role": "assistant", "content": str(content)}


def error_to_string(err: Exception) -> str:
    """
    Convert exceptions into readable strings for user-facing error messages.

    returns:
    - str – descriptive message; ValidationError messages carry a JSON path
      showing where validation failed (e.g. "... at $.profile").
    """
    if isinstance(err, ValidationError):
        path = "$" + "".join(f"[{repr(p)}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


# -------------------- Public exports -------------------- #

__all__ = [
    "load_schema",
    "validate_with_schema",
    "validate_advice_request",
    "validate_advice_output",
    "make_ok_message",
    "error_to_string",
]
