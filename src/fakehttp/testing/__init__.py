"""Test utilities for code that talks to a fake.

Request assertions, response assertions, and the ``fake_http`` pytest
fixture (see ``fakehttp.testing.plugin``)::

    from fakehttp.testing import assert_requested, assert_json
"""

from fakehttp.testing.assertions import (
    assert_json,
    assert_not_requested,
    assert_requested,
    assert_status,
)

__all__ = [
    "assert_json",
    "assert_not_requested",
    "assert_requested",
    "assert_status",
]
