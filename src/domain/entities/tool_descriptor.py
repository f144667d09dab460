"""
Domain entity describing a tool as the completion engine sees it.
Zero external dependencies — pure Python dataclass only.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict)
