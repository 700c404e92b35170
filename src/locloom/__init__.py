"""locloom: A Python client for the Library of Congress JSON API."""

from .attributes import (
    AttributesSelect,
    Facet,
    FacetCategory,
    FacetRequest,
    Format,
    ItemAttributes,
    MediaType,
    ResourceAttributes,
    SortField,
)

# Import main client class
from .client import LocClient
from .config import LocApiSettings, get_settings
from .constants import LOCLOOM_VERSION
from .decoder import JsonDecoder
from .endpoints import (
    CollectionEndpoint,
    CollectionsEndpoint,
    Endpoint,
    FormatEndpoint,
    ItemEndpoint,
    ResourceEndpoint,
    SearchEndpoint,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    ConstructionError,
    DecodeError,
    LocApiError,
    NetworkError,
    NotFoundError,
    Stage,
    TimeoutError,
    TransportError,
    ValidationError,
)

# Re-export key models from the models subpackage
from .models import (
    CollectionResponse,
    CollectionsResponse,
    FormatResponse,
    ItemResponse,
    ResourceResponse,
    SearchResponse,
)
from .params import CommonParams, ItemParams, ResourceParams
from .transport import HttpxTransport

__version__ = LOCLOOM_VERSION

__all__ = [
    # Core Client
    "LocClient",
    "LocApiSettings",
    "get_settings",
    "HttpxTransport",
    "JsonDecoder",
    # Request vocabulary
    "AttributesSelect",
    "Facet",
    "FacetCategory",
    "FacetRequest",
    "Format",
    "ItemAttributes",
    "MediaType",
    "ResourceAttributes",
    "SortField",
    # Parameters and endpoints
    "CommonParams",
    "ItemParams",
    "ResourceParams",
    "Endpoint",
    "SearchEndpoint",
    "CollectionsEndpoint",
    "CollectionEndpoint",
    "FormatEndpoint",
    "ItemEndpoint",
    "ResourceEndpoint",
    # Exceptions
    "LocApiError",
    "Stage",
    "APIError",
    "ConfigurationError",
    "ConstructionError",
    "DecodeError",
    "NetworkError",
    "NotFoundError",
    "TimeoutError",
    "TransportError",
    "ValidationError",
    # Responses
    "CollectionResponse",
    "CollectionsResponse",
    "FormatResponse",
    "ItemResponse",
    "ResourceResponse",
    "SearchResponse",
]
