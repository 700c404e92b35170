"""Tests for the LocClient facade."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from conftest import (
    BASE_URL,
    COLLECTIONS_PAYLOAD,
    ITEM_PAYLOAD,
    RESOURCE_PAYLOAD,
    SEARCH_PAYLOAD,
    FakeTransport,
    to_body,
)
from locloom import LocClient
from locloom.attributes import (
    AttributesSelect,
    Facet,
    FacetRequest,
    ItemAttributes,
    MediaType,
    ResourceAttributes,
    SortField,
)
from locloom.client import normalize_collection_name
from locloom.endpoints import ItemEndpoint, SearchEndpoint
from locloom.exceptions import (
    APIError,
    ConstructionError,
    DecodeError,
    NetworkError,
    NotFoundError,
    Stage,
    TimeoutError,
    ValidationError,
)
from locloom.models import (
    CollectionResponse,
    CollectionsResponse,
    FormatResponse,
    ItemResponse,
    ResourceResponse,
    SearchResponse,
)
from locloom.params import CommonParams
from locloom.types import Decoder


@pytest.fixture
def client(settings, fake_transport):
    with LocClient(settings=settings, transport=fake_transport) as client:
        yield client


# --- URL building ---


def test_search_builds_full_url(client, fake_transport):
    response, url = client.search(
        "dog",
        attributes=AttributesSelect(include=["pagination", "results"]),
        facets=["subject:animals"],
        per_page=25,
        page=1,
        sort=SortField.TITLE,
    )

    assert url == (
        "https://example.org/search/?fo=json&at=pagination,results&q=dog"
        "&fa=subject%3Aanimals&c=25&sp=1&sb=title_s"
    )
    assert fake_transport.calls == [("GET", url)]
    assert isinstance(response, SearchResponse)
    assert response.total_results == 1234


def test_search_query_only(client):
    _, url = client.search("baseball")
    assert url == "https://example.org/search/?fo=json&q=baseball"


def test_blank_query_is_omitted(client):
    _, url = client.search("   ")
    assert url == "https://example.org/search/?fo=json"


@pytest.mark.parametrize(
    "facets",
    [
        Facet.subject("animals"),
        "subject:animals",
        ["subject:animals"],
        ("subject:animals",),
        [Facet.subject("animals")],
        (f for f in ["subject:animals"]),
        FacetRequest(facets=[Facet.subject("animals")]),
    ],
)
def test_facets_accept_several_shapes(client, facets):
    _, url = client.search("dog", facets=facets)
    assert url == "https://example.org/search/?fo=json&q=dog&fa=subject%3Aanimals"


def test_multiple_facets_keep_order(client):
    _, url = client.search("dog", facets=[Facet.location("ohio"), Facet.subject("wildlife")])
    pairs = parse_qsl(urlsplit(url).query)
    assert [v for k, v in pairs if k == "fa"] == ["location:ohio", "subject:wildlife"]


def test_get_collections(settings):
    transport = FakeTransport(body=to_body(COLLECTIONS_PAYLOAD))
    client = LocClient(settings=settings, transport=transport)

    response, url = client.get_collections()

    assert url == "https://example.org/collections/?fo=json"
    assert isinstance(response, CollectionsResponse)
    assert response.results[0].title == "Civil War Maps"


@pytest.mark.parametrize(
    "name", ["civil-war-maps", "Civil War Maps", "  civil_war_maps ", "CIVIL-WAR-MAPS"]
)
def test_get_collection_normalizes_name(client, name):
    response, url = client.get_collection(name, per_page=10)
    assert url == "https://example.org/collections/civil-war-maps/?fo=json&c=10"
    assert isinstance(response, CollectionResponse)


def test_normalize_collection_name():
    assert normalize_collection_name("Civil War_Maps") == "civil-war-maps"
    assert normalize_collection_name("baseball-cards") == "baseball-cards"


@pytest.mark.parametrize("media_type", [MediaType.MAPS, "maps"])
def test_get_format(client, media_type):
    response, url = client.get_format(media_type, "mountain", sort=SortField.DATE_DESC)
    assert url == "https://example.org/maps/?fo=json&q=mountain&sb=date_desc"
    assert isinstance(response, FormatResponse)


def test_get_item(settings):
    transport = FakeTransport(body=to_body(ITEM_PAYLOAD))
    client = LocClient(settings=settings, transport=transport)

    response, url = client.get_item(" 2014717546 ", ItemAttributes(item=True, cite_this=True))

    assert url == "https://example.org/item/2014717546/?fo=json&at=item,cite_this"
    assert isinstance(response, ItemResponse)
    assert response.item_record.date == "1886"


def test_get_resource(settings):
    transport = FakeTransport(body=to_body(RESOURCE_PAYLOAD))
    client = LocClient(settings=settings, transport=transport)

    response, url = client.get_resource(
        "g4084cm.g063031886", ResourceAttributes(segments=False)
    )

    assert url == "https://example.org/resource/g4084cm.g063031886/?fo=json&at!=segments"
    assert isinstance(response, ResourceResponse)
    assert response.resource.pdf == "https://tile.loc.gov/1.pdf"


def test_url_for_does_not_call_transport(client, fake_transport):
    url = client.url_for(ItemEndpoint(item_id="2014717546"))
    assert url == "https://example.org/item/2014717546/"
    assert fake_transport.calls == []


def test_fetch_uses_model_registered_for_kind(settings):
    transport = FakeTransport(body=to_body(ITEM_PAYLOAD))
    client = LocClient(settings=settings, transport=transport)

    response, url = client.fetch(ItemEndpoint(item_id="2014717546"))

    assert isinstance(response, ItemResponse)
    assert url == "https://example.org/item/2014717546/"


def test_fetch_with_explicit_model(client):
    endpoint = SearchEndpoint(params=CommonParams(query="dog"))
    response, _ = client.fetch(endpoint, CollectionResponse)
    assert isinstance(response, CollectionResponse)


def test_missing_results_section_is_none(settings):
    transport = FakeTransport(body=to_body({"pagination": {"of": 0}}))
    client = LocClient(settings=settings, transport=transport)

    response, _ = client.search("nothing")

    assert response.results is None
    assert response.total_results == 0


# --- Validation and construction errors ---


@pytest.mark.parametrize(
    ("call", "endpoint"),
    [
        (lambda c: c.search("dog", page=0), "search"),
        (lambda c: c.search("dog", per_page=-5), "search"),
        (lambda c: c.search("dog", facets=["no-colon"]), "search"),
        (lambda c: c.search("dog", facets=["nonsense:value"]), "search"),
        (lambda c: c.get_format("not-a-format"), "format"),
        (lambda c: c.get_collection("   "), "collection"),
        (lambda c: c.get_item(""), "item"),
        (lambda c: c.get_resource("  "), "resource"),
        (lambda c: c.get_item(None), "item"),
        (lambda c: c.get_resource(12345), "resource"),
        (lambda c: c.get_collection(None), "collection"),
        (lambda c: c.search(42), "search"),
        (lambda c: c.search("dog", facets=5), "search"),
    ],
)
def test_invalid_arguments_raise_before_transport(client, fake_transport, call, endpoint):
    with pytest.raises(ValidationError) as exc_info:
        call(client)

    assert exc_info.value.stage is Stage.VALIDATION
    assert exc_info.value.endpoint == endpoint
    assert fake_transport.calls == []


@pytest.mark.parametrize(
    "base_url",
    [
        "not a url",
        "ftp://example.org",
        "https://example.org/?x=1",
        "https://exa mple.org",
        "https://example.org:99999",
    ],
)
def test_malformed_base_url(base_url, fake_transport):
    client = LocClient(base_url=base_url, transport=fake_transport)

    with pytest.raises(ConstructionError) as exc_info:
        client.search("dog")

    assert exc_info.value.stage is Stage.CONSTRUCTION
    assert exc_info.value.endpoint == "search"
    assert fake_transport.calls == []


# --- Transport and decode errors ---


def test_server_error_raises_api_error(settings):
    client = LocClient(settings=settings, transport=FakeTransport(status=500, body=b"oops"))

    with pytest.raises(APIError) as exc_info:
        client.search("dog")

    error = exc_info.value
    assert not isinstance(error, NotFoundError)
    assert error.status_code == 500
    assert error.stage is Stage.TRANSPORT
    assert error.endpoint == "search"
    assert error.url == "https://example.org/search/?fo=json&q=dog"
    assert "[status 500]" in str(error)


def test_not_found_raises_not_found_error(settings):
    client = LocClient(settings=settings, transport=FakeTransport(status=404, body=b""))

    with pytest.raises(NotFoundError) as exc_info:
        client.get_item("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.endpoint == "item"


@pytest.mark.parametrize("error", [NetworkError("connection refused"), TimeoutError("timed out")])
def test_transport_errors_are_tagged_with_call_context(settings, error):
    client = LocClient(settings=settings, transport=FakeTransport(error=error))

    with pytest.raises(type(error)) as exc_info:
        client.search("dog")

    assert exc_info.value is error
    assert error.stage is Stage.TRANSPORT
    assert error.endpoint == "search"
    assert error.url == "https://example.org/search/?fo=json&q=dog"


def test_unexpected_body_raises_decode_error(settings):
    client = LocClient(settings=settings, transport=FakeTransport(body=b"<html>maintenance</html>"))

    with pytest.raises(DecodeError) as exc_info:
        client.search("dog")

    assert exc_info.value.stage is Stage.DECODE
    assert exc_info.value.endpoint == "search"
    assert exc_info.value.url == "https://example.org/search/?fo=json&q=dog"


# --- Concurrency ---


def test_concurrent_calls_get_their_own_responses(settings):
    def echo(url: str) -> tuple[int, bytes]:
        return 200, to_body({"results": [{"id": url}]})

    transport = FakeTransport(handler=echo)
    client = LocClient(settings=settings, transport=transport)
    terms = [f"term{i}" for i in range(20)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(client.search, terms))

    for term, (response, url) in zip(terms, outcomes, strict=True):
        assert url == f"{BASE_URL}/search/?fo=json&q={term}"
        assert response.results[0].id == url
    assert len(transport.calls) == len(terms)


# --- Configuration and lifecycle ---


def test_default_base_url(fake_transport):
    client = LocClient(transport=fake_transport)
    assert client.base_url == "https://www.loc.gov"


def test_base_url_from_environment(monkeypatch, fake_transport):
    monkeypatch.setenv("LOC_API_BASE_URL", "https://mirror.example.net")

    client = LocClient(transport=fake_transport)
    _, url = client.search("dog")

    assert client.base_url == "https://mirror.example.net"
    assert url.startswith("https://mirror.example.net/search/?")


def test_explicit_base_url_wins(monkeypatch, fake_transport):
    monkeypatch.setenv("LOC_API_BASE_URL", "https://mirror.example.net")
    client = LocClient(base_url="https://other.example.com/", transport=fake_transport)

    _, url = client.search("dog")

    assert url == "https://other.example.com/search/?fo=json&q=dog"


def test_injected_transport_is_not_closed(settings, fake_transport):
    with LocClient(settings=settings, transport=fake_transport):
        pass
    assert not fake_transport.closed


def test_owned_transport_is_closed(settings):
    client = LocClient(settings=settings)
    client.close()
    assert client._transport._http_client.is_closed


# --- End to end through httpx ---


def test_end_to_end_item(settings, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/item/2014717546/?fo=json", json=ITEM_PAYLOAD)

    with LocClient(settings=settings) as client:
        response, url = client.get_item("2014717546")

    assert url == f"{BASE_URL}/item/2014717546/?fo=json"
    assert response.item_record.title == "Sanborn Fire Insurance Map from Cleveland"


def test_end_to_end_search_with_retry(settings, httpx_mock):
    url = f"{BASE_URL}/search/?fo=json&q=baseball&fa=subject%3Asports"
    httpx_mock.add_response(url=url, status_code=502)
    httpx_mock.add_response(url=url, json=SEARCH_PAYLOAD)

    with LocClient(settings=settings) as client:
        response, got_url = client.search("baseball", facets=[Facet.subject("sports")])

    assert got_url == url
    assert response.results[0].title == "Baseball game"
    assert len(httpx_mock.get_requests()) == 2


def test_end_to_end_not_found(settings, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/item/nope/?fo=json", status_code=404)

    with LocClient(settings=settings) as client, pytest.raises(NotFoundError):
        client.get_item("nope")

    assert len(httpx_mock.get_requests()) == 1


def test_decoder_receives_call_context(settings, fake_transport):
    decoder = MagicMock(spec=Decoder)
    decoder.decode.return_value = SearchResponse()
    client = LocClient(settings=settings, transport=fake_transport, decoder=decoder)

    response, url = client.search("dog")

    assert response is decoder.decode.return_value
    decoder.decode.assert_called_once_with(
        fake_transport.body, SearchResponse, endpoint="search", url=url
    )
