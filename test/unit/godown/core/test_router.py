"""Tests for router response and error mapping."""

from pathlib import Path

import pytest
from robyn import Response, StreamingResponse

from godown.content.errors import ContentNotFound, GodownError, InternalRenderError
from godown.core.router import (
    HTML_CONTENT_TYPE,
    NOT_FOUND_BODY,
    TEXT_CONTENT_TYPE,
    parse_error,
    parse_response,
    run_handler,
)
from godown.core.template import PageTemplate
from godown.models.content import MediaFile, RenderedPage


# -----------------------------------------------------------------------------
# parse_response Tests
# -----------------------------------------------------------------------------


class TestParseResponse:
    """Tests for parse_response function."""

    def test_response_passthrough(self) -> None:
        """Verify Response objects pass through unchanged."""
        original = Response(status_code=201, headers={}, description="created")
        result = parse_response(original)
        assert result is original

    def test_rendered_page_to_html(self) -> None:
        """Verify pages are framed by the template as HTML."""
        page = RenderedPage(title="README.md", content="<p>hi</p>")
        result = parse_response(page)

        assert result.status_code == 200
        assert result.headers["content-type"] == HTML_CONTENT_TYPE
        assert "<p>hi</p>" in result.description
        assert "/__godown_style.css" in result.description

    def test_media_file_streams(self, tmp_path: Path) -> None:
        """Verify media files stream verbatim with their MIME type."""
        path = tmp_path / "test.png"
        path.write_bytes(b"fake png content")
        result = parse_response(MediaFile(path=path, content_type="image/png"))

        assert isinstance(result, StreamingResponse)
        assert result.status_code == 200
        assert result.headers.get("content-type") == "image/png"
        assert b"".join(result.content) == b"fake png content"

    def test_missing_media_raises(self, tmp_path: Path) -> None:
        """Verify missing media surfaces as ContentNotFound."""
        with pytest.raises(ContentNotFound):
            parse_response(MediaFile(path=tmp_path / "gone.png", content_type="image/png"))

    def test_template_failure_raises(self) -> None:
        """Verify template failures surface as InternalRenderError."""
        broken = PageTemplate("{{ title.missing.deeper }}")
        with pytest.raises(InternalRenderError):
            parse_response(RenderedPage(title="x", content=""), template=broken)

    def test_other_to_string(self) -> None:
        """Verify other types are converted to string."""
        result = parse_response("plain text")
        assert result.status_code == 200
        assert result.description == "plain text"


# -----------------------------------------------------------------------------
# parse_error Tests
# -----------------------------------------------------------------------------


class TestParseError:
    """Tests for parse_error function."""

    def test_not_found(self) -> None:
        """Verify ContentNotFound maps to a bare 404."""
        result = parse_error(ContentNotFound("/secret", "outside served root"))
        assert result.status_code == 404
        assert result.headers["content-type"] == TEXT_CONTENT_TYPE
        assert result.description == NOT_FOUND_BODY
        assert "secret" not in result.description

    @pytest.mark.parametrize("error", [InternalRenderError("boom"), GodownError("other")])
    def test_internal_errors(self, error: GodownError) -> None:
        """Verify other errors map to 500."""
        assert parse_error(error).status_code == 500


# -----------------------------------------------------------------------------
# run_handler Tests
# -----------------------------------------------------------------------------


class TestRunHandler:
    """Tests for run_handler."""

    async def test_page_handler(self, make_mock_request) -> None:
        """Verify handler results are converted."""

        async def handler() -> RenderedPage:
            return RenderedPage(title="t", content="<p>ok</p>")

        result = await run_handler(handler, make_mock_request("/t"))
        assert result.status_code == 200
        assert "<p>ok</p>" in result.description

    async def test_not_found_handler(self, make_mock_request) -> None:
        """Verify ContentNotFound raised by a handler becomes 404."""

        async def handler() -> RenderedPage:
            raise ContentNotFound("/nope")

        result = await run_handler(handler, make_mock_request("/nope"))
        assert result.status_code == 404

    async def test_missing_media_handler(self, make_mock_request, tmp_path: Path) -> None:
        """Verify media open failures become 404 before any body is sent."""

        async def handler() -> MediaFile:
            return MediaFile(path=tmp_path / "gone.mp4", content_type="video/mp4")

        result = await run_handler(handler, make_mock_request("/gone.mp4"))
        assert result.status_code == 404

    async def test_request_passed_when_declared(self, make_mock_request) -> None:
        """Verify a handler declaring the request receives it."""
        request = make_mock_request("/echo")

        async def handler(request) -> str:
            return request.url.path

        result = await run_handler(handler, request, request=request)
        assert result.description == "/echo"

    async def test_handler_without_request(self, make_mock_request) -> None:
        """Verify handlers that do not declare the request run without it."""

        async def handler() -> str:
            return "ok"

        result = await run_handler(handler, make_mock_request("/plain"))
        assert result.description == "ok"
