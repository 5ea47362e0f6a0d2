from tracelink.client import TracelinkClient
from tracelink.config import BASE_URL, ClientConfig, Settings
from tracelink.dispatcher import Dispatcher
from tracelink.errors import TracelinkError
from tracelink.params import build_list_params
from tracelink.schemas import DocumentUpload, ListOptions, RequestOptions

__all__ = [
    "BASE_URL",
    "ClientConfig",
    "Dispatcher",
    "DocumentUpload",
    "ListOptions",
    "RequestOptions",
    "Settings",
    "TracelinkClient",
    "TracelinkError",
    "build_list_params",
]
