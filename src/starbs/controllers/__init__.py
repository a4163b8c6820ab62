"""Controllers: dispatch plus response shaping."""

from starbs.controllers.base import Controller
from starbs.controllers.context import Context
from starbs.controllers.shaping import encode_envelope, error, raw, redirect, success

__all__ = [
    "Context",
    "Controller",
    "encode_envelope",
    "error",
    "raw",
    "redirect",
    "success",
]
