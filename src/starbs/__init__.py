"""Starbs — HTTP controllers with JSON envelope helpers.

A controller receives a request, a response to fill and route
arguments, then shapes the response as a success or error envelope,
a redirect, or a raw payload.

Basic usage::

    from starbs import Context, Controller, Request, Response

    class Hello(Controller[None]):
        def handle(self, ctx: Context) -> Response:
            return ctx.success({"hello": ctx.args["name"]})

    response = Hello(None).dispatch(Request(), Response(), {"name": "world"})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Context",
    "Controller",
    "ControllerConfig",
    "FormData",
    "Headers",
    "Request",
    "Response",
    "StarbsError",
    "UploadFile",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import starbs`` fast while providing a clean top-level API.
    """
    if name in ("Context", "Controller"):
        from starbs import controllers as _controllers

        return getattr(_controllers, name)

    if name == "ControllerConfig":
        from starbs.config import ControllerConfig

        return ControllerConfig

    if name in ("FormData", "Headers", "Request", "Response", "UploadFile"):
        from starbs import http as _http

        return getattr(_http, name)

    if name in ("ConfigurationError", "StarbsError"):
        from starbs import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
