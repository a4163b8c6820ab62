"""Response shaping helpers — success, error, redirect, raw.

Each helper takes the response explicitly, mutates its status,
headers and body in place, and returns the same object so handlers
can ``return success(response, {...})``.

Content-Type is merged into the existing headers: any previous
Content-Type value is replaced and every other header is kept.
Location is set the same way. Nothing here validates or
catches: a non-serializable payload raises the JSON encoder's own
``TypeError``.
"""

import json as json_module
from collections.abc import Mapping
from typing import Any

from starbs.config import DEFAULT_CONFIG, ControllerConfig
from starbs.http.protocols import OutboundResponse


def encode_envelope(key: str, data: Mapping[str, Any], config: ControllerConfig = DEFAULT_CONFIG) -> str:
    """Pretty-print ``{key: data}`` as JSON, keeping *data*'s key order."""
    body = json_module.dumps(
        {key: data},
        indent=config.json_indent,
        ensure_ascii=config.json_ensure_ascii,
    )
    if config.json_escape_slashes:
        # "/" only occurs inside JSON strings, where "\/" is an equivalent escape
        body = body.replace("/", "\\/")
    return body


def success[R: OutboundResponse](
    response: R,
    data: Mapping[str, Any],
    code: int = 200,
    *,
    config: ControllerConfig = DEFAULT_CONFIG,
) -> R:
    """Fill *response* with a ``{"success": data}`` JSON envelope."""
    return _json(response, config.success_key, data, code, config)


def error[R: OutboundResponse](
    response: R,
    data: Mapping[str, Any],
    code: int = 500,
    *,
    config: ControllerConfig = DEFAULT_CONFIG,
) -> R:
    """Fill *response* with an ``{"error": data}`` JSON envelope."""
    return _json(response, config.error_key, data, code, config)


def redirect[R: OutboundResponse](response: R, url: str, code: int = 302) -> R:
    """Point *response* at *url*. The body is left untouched."""
    response.set_status(code)
    response.set_header("Location", url)
    return response


def raw[R: OutboundResponse](response: R, data: str | bytes, mime: str, code: int = 200) -> R:
    """Fill *response* with *data* verbatim under the given MIME type."""
    response.set_status(code)
    response.merge_headers({"Content-Type": mime})
    response.set_body(data)
    return response


def _json[R: OutboundResponse](
    response: R,
    key: str,
    data: Mapping[str, Any],
    code: int,
    config: ControllerConfig,
) -> R:
    body = encode_envelope(key, data, config)
    response.set_status(code)
    response.merge_headers({"Content-Type": config.json_content_type})
    response.set_body(body)
    return response
