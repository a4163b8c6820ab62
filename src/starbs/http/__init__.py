"""HTTP primitives consumed and filled by controllers."""

from starbs.http.forms import FormData, UploadFile
from starbs.http.headers import Headers
from starbs.http.protocols import InboundRequest, MultiValueMapping, OutboundResponse
from starbs.http.request import Request
from starbs.http.response import Response

__all__ = [
    "FormData",
    "Headers",
    "InboundRequest",
    "MultiValueMapping",
    "OutboundResponse",
    "Request",
    "Response",
    "UploadFile",
]
