from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

from .response import ResponseMode

PROJECT_SERVICE = "project-service"

_formatter = string.Formatter()


class Target(str, Enum):
    GATEWAY = "gateway"  # <gateway base>/<service>/<path>
    RESEARCH = "research"  # standalone ongoing-research base


@dataclass(frozen=True)
class Endpoint:
    """
    Declarative description of one remote operation.
    path uses str.format placeholders, e.g. "/api/documents/{documentId}".
    """

    name: str
    method: str
    path: str
    mode: ResponseMode = ResponseMode.ENVELOPE
    service: Optional[str] = PROJECT_SERVICE
    target: Target = Target.GATEWAY
    authenticated: bool = False

    @property
    def path_params(self) -> List[str]:
        return [name for _, name, _, _ in _formatter.parse(self.path) if name]

    def format_path(self, path_params: Optional[Mapping[str, Any]] = None) -> str:
        """Interpolate path parameters, each encoded as a single path segment."""
        values = path_params or {}
        encoded: Dict[str, str] = {}
        for name in self.path_params:
            value = values.get(name)
            if value is None or value == "":
                raise ValueError(f"Missing path parameter '{name}' for {self.name}")
            encoded[name] = quote(str(value), safe="")
        return self.path.format(**encoded)


def endpoint_table(endpoints: Iterable[Endpoint]) -> Dict[str, Endpoint]:
    """Index endpoints by name, rejecting duplicates."""
    table: Dict[str, Endpoint] = {}
    for endpoint in endpoints:
        if endpoint.name in table:
            raise ValueError(f"Duplicate endpoint name detected: {endpoint.name}")
        table[endpoint.name] = endpoint
    return table


__all__ = ["Endpoint", "Target", "PROJECT_SERVICE", "endpoint_table"]
