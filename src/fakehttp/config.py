"""Fake configuration.

FakeConfig is a frozen dataclass: immutable after creation, shared by
every responder of one fake, no string-key dict lookups.
"""

import json
from dataclasses import dataclass

from fakehttp._internal.types import Encoder


@dataclass(frozen=True, slots=True)
class FakeConfig:
    """Per-fake configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FakeConfig(content_type="application/vnd.api+json")
    """

    # Content type used when a handler never calls set_content_type().
    # Applies to every body kind, strings included.
    content_type: str = "application/json"

    # Serializer for Mapping return values
    encoder: Encoder = json.dumps
