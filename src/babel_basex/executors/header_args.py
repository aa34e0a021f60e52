"""
Helpers over the header-argument mapping the host passes with each block.

Keys are accepted with or without the leading colon, so ``{":db": "x"}`` and
``{"db": "x"}`` mean the same thing.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

_VAR_NAME = re.compile(r"^[A-Za-z_][\w.\-]*$")


def _key(name: str) -> str:
    return name[1:] if name.startswith(":") else name


def normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Strip leading colons from keys. Later keys win on collision."""
    if not params:
        return {}
    return {_key(str(k)): v for k, v in params.items()}


def get_param(params: Optional[Mapping[str, Any]], name: str, default: Any = None) -> Any:
    value = normalize_params(params).get(_key(name))
    return default if value is None else value


def merge_defaults(defaults: Optional[Mapping[str, Any]], params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Adapter defaults first, block header arguments on top."""
    merged = normalize_params(defaults)
    merged.update(normalize_params(params))
    return merged


def _split_assignment(item: str) -> Tuple[str, str]:
    if "=" not in item:
        raise ValueError(f"Variable assignment must look like name=value, got {item!r}")
    name, value = item.split("=", 1)
    return name.strip(), value.strip()


def get_vars(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, Any]]:
    """
    Collect ``:var`` header arguments as ordered (name, value) pairs.

    ``:var`` may be a mapping, a single ``"name=value"`` string, or a list of
    such strings or of (name, value) pairs.
    """
    raw = get_param(params, "var")
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        items = list(raw.items())
    elif isinstance(raw, str):
        items = [_split_assignment(raw)]
    else:
        items = []
        for item in raw:
            if isinstance(item, str):
                items.append(_split_assignment(item))
            else:
                name, value = item
                items.append((name, value))

    pairs = []
    for name, value in items:
        name = str(name).lstrip("$")
        if not _VAR_NAME.match(name):
            raise ValueError(f"Invalid variable name: {name!r}")
        pairs.append((name, value))
    return pairs


def xquery_literal(value: Any) -> str:
    """Render a Python value as an XQuery literal."""
    if value is None:
        return "()"
    if isinstance(value, bool):
        return "true()" if value else "false()"
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "xs:double('NaN')"
        return "xs:double('INF')" if value > 0 else "xs:double('-INF')"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "(" + ", ".join(xquery_literal(v) for v in value) + ")"
    text = str(value).replace("&", "&amp;").replace('"', '""')
    return f'"{text}"'


def var_declarations(params: Optional[Mapping[str, Any]]) -> str:
    """One ``declare variable`` line per ``:var``, or an empty string."""
    lines = [
        f"declare variable ${name} := {xquery_literal(value)};"
        for name, value in get_vars(params)
    ]
    return "".join(line + "\n" for line in lines)
