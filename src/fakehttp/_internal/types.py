"""Shared type aliases used across fakehttp modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route handler: receives up to (params, options, response) and returns a body
Handler: TypeAlias = Callable[..., Any]

# Body encoder for Mapping return values
Encoder: TypeAlias = Callable[[Any], str]

# Request options as passed to request(); opaque to the core
Options: TypeAlias = Mapping[str, Any]
