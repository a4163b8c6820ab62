"""Tests for starbs.http.request — frozen Request with form lookups."""

import pytest

from starbs.http.forms import FormData, UploadFile
from starbs.http.protocols import InboundRequest
from starbs.http.request import Request


class TestRequest:
    def test_defaults(self) -> None:
        req = Request()
        assert req.method == "GET"
        assert req.path == "/"
        assert len(req.headers) == 0
        assert len(req.form) == 0
        assert len(req.files) == 0

    def test_form_field(self) -> None:
        req = Request(method="POST", form=FormData({"name": ["alice"]}))
        assert req.form_field("name") == "alice"

    def test_form_field_repeated_takes_last(self) -> None:
        req = Request(method="POST", form=FormData({"name": ["alice", "bob"]}))
        assert req.form_field("name") == "bob"

    def test_form_field_blank_value(self) -> None:
        req = Request(method="POST", form=FormData({"name": [""]}))
        assert req.form_field("name") == ""

    def test_form_field_missing_is_none(self) -> None:
        assert Request().form_field("missing_key") is None

    def test_uploaded_file(self) -> None:
        upload = UploadFile("avatar.png", "image/png", b"\x89PNG")
        req = Request(method="POST", form=FormData({}, files={"avatar": upload}))
        assert req.uploaded_file("avatar") is upload
        assert req.files["avatar"] is upload

    def test_uploaded_file_missing_is_none(self) -> None:
        assert Request().uploaded_file("missing_key") is None

    def test_satisfies_inbound_protocol(self) -> None:
        assert isinstance(Request(), InboundRequest)

    def test_frozen(self) -> None:
        req = Request()
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]
