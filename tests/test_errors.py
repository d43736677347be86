#!filepath: tests/test_errors.py
from __future__ import annotations

import pytest

from wppages.wordpress.errors import (
    ErrorKind,
    WordPressAuthError,
    WordPressError,
    WordPressNotFoundError,
    WordPressResponseError,
    WordPressServerError,
    response_error,
)


@pytest.mark.parametrize(
    ("status", "cls", "kind"),
    [
        (404, WordPressNotFoundError, ErrorKind.NOT_FOUND),
        (401, WordPressAuthError, ErrorKind.AUTH),
        (403, WordPressAuthError, ErrorKind.AUTH),
        (409, WordPressResponseError, ErrorKind.CLIENT),
        (500, WordPressServerError, ErrorKind.SERVER),
        (503, WordPressServerError, ErrorKind.SERVER),
    ],
)
def test_response_error_picks_most_specific_class(status, cls, kind) -> None:
    err = response_error("fetch page 1", status, None)
    assert type(err) is cls
    assert err.kind is kind
    assert isinstance(err, WordPressError)


def test_message_keeps_flat_shape() -> None:
    err = response_error("update page 3", 500, {"message": "ñ"})
    assert str(err) == 'Failed to update page 3 (500): {"message": "ñ"}'


def test_error_code_only_for_json_objects() -> None:
    assert response_error("x", 400, "plain text").error_code is None
    assert response_error("x", 400, {"code": "bad"}).error_code == "bad"
