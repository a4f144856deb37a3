import httpx
import pytest

from fieldroute.models.domain import Location
from fieldroute.services.routing.dispatcher import get_provider
from fieldroute.services.routing.errors import ProviderUnavailable
from fieldroute.services.routing.google_client import GoogleDistanceMatrixProvider
from fieldroute.services.routing.haversine import HaversineMatrixProvider
from fieldroute.services.routing.models import Reachable, Unreachable
from fieldroute.services.routing.osrm_client import OSRMTableProvider

GOOGLE_URL = "https://maps.test/maps/api/distancematrix/json"
OSRM_URL = "http://osrm.test"

LOCATIONS = [
    Location(id="A", lat=52.0, lng=4.0),
    Location(id="B", lat=52.1, lng=4.1),
]


def _element(duration: int, distance: int) -> dict:
    return {
        "status": "OK",
        "duration": {"value": duration, "text": f"{duration // 60} mins"},
        "distance": {"value": distance, "text": f"{distance / 1000} km"},
    }


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def _client(recorder: Recorder) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(recorder))


def _google(recorder: Recorder, api_key: str | None = "test-key") -> GoogleDistanceMatrixProvider:
    provider = GoogleDistanceMatrixProvider(api_key=api_key, base_url=GOOGLE_URL, client=_client(recorder))
    provider.api_key = api_key
    return provider


def test_google_builds_matrix_from_single_request():
    payload = {
        "status": "OK",
        "rows": [
            {"elements": [_element(0, 0), _element(600, 9000)]},
            {"elements": [{"status": "ZERO_RESULTS"}, _element(0, 0)]},
        ],
    }
    recorder = Recorder(httpx.Response(200, json=payload))

    matrix = _google(recorder).get_matrix(LOCATIONS)

    assert len(recorder.requests) == 1
    params = recorder.requests[0].url.params
    assert params["origins"] == "52.0,4.0|52.1,4.1"
    assert params["destinations"] == params["origins"]
    assert params["mode"] == "driving"
    assert params["key"] == "test-key"
    assert matrix.size == 2
    assert matrix.cell(0, 1) == Reachable(duration_seconds=600, distance_meters=9000)
    assert isinstance(matrix.cell(1, 0), Unreachable)


def test_google_without_api_key_fails_without_calling_upstream():
    recorder = Recorder(httpx.Response(200, json={}))

    with pytest.raises(ProviderUnavailable):
        _google(recorder, api_key=None).get_matrix(LOCATIONS)
    assert recorder.requests == []


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream exploded"),
        httpx.Response(200, json={"status": "REQUEST_DENIED", "error_message": "bad key"}),
        httpx.Response(200, json={"status": "OK", "rows": []}),
        httpx.Response(200, text="<html>not json</html>"),
    ],
)
def test_google_whole_call_failures_raise_provider_unavailable(response: httpx.Response):
    recorder = Recorder(response)

    with pytest.raises(ProviderUnavailable):
        _google(recorder).get_matrix(LOCATIONS)
    assert len(recorder.requests) == 1


def test_google_network_error_raises_provider_unavailable():
    recorder = Recorder(error=httpx.ConnectError("connection refused"))

    with pytest.raises(ProviderUnavailable):
        _google(recorder).get_matrix(LOCATIONS)


def test_single_location_is_answered_locally():
    recorder = Recorder(httpx.Response(500))

    matrix = _google(recorder).get_matrix(LOCATIONS[:1])

    assert matrix.size == 1
    assert matrix.cell(0, 0) == Reachable(0, 0)
    assert recorder.requests == []


def test_osrm_builds_matrix_with_unreachable_cells():
    payload = {
        "code": "Ok",
        "durations": [[0, 299.6], [None, 0]],
        "distances": [[0, 4100.4], [None, 0]],
    }
    recorder = Recorder(httpx.Response(200, json=payload))
    provider = OSRMTableProvider(base_url=OSRM_URL, profile="driving", client=_client(recorder))

    matrix = provider.get_matrix(LOCATIONS)

    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.url.path == "/table/v1/driving/4.0,52.0;4.1,52.1"
    assert request.url.params["annotations"] == "duration,distance"
    assert matrix.cell(0, 1) == Reachable(duration_seconds=300, distance_meters=4100)
    assert isinstance(matrix.cell(1, 0), Unreachable)


def test_osrm_error_code_raises_provider_unavailable():
    recorder = Recorder(httpx.Response(200, json={"code": "InvalidQuery"}))
    provider = OSRMTableProvider(base_url=OSRM_URL, client=_client(recorder))

    with pytest.raises(ProviderUnavailable):
        provider.get_matrix(LOCATIONS)


@pytest.mark.parametrize(
    "durations, distances",
    [
        ([5, 6], [[0, 10], [10, 0]]),
        ([[0, -5], [5, 0]], [[0, 10], [10, 0]]),
        ([[0, "fast"], [5, 0]], [[0, 10], [10, 0]]),
        ({"rows": 2}, [[0, 10], [10, 0]]),
    ],
)
def test_osrm_malformed_table_raises_provider_unavailable(durations, distances):
    payload = {"code": "Ok", "durations": durations, "distances": distances}
    recorder = Recorder(httpx.Response(200, json=payload))
    provider = OSRMTableProvider(base_url=OSRM_URL, client=_client(recorder))

    with pytest.raises(ProviderUnavailable):
        provider.get_matrix(LOCATIONS)
    assert len(recorder.requests) == 1


def test_osrm_unconfigured_raises_provider_unavailable(monkeypatch):
    from fieldroute.config import settings

    monkeypatch.setattr(settings, "osrm_base_url", None)
    provider = OSRMTableProvider()

    assert provider.is_configured() is False
    with pytest.raises(ProviderUnavailable):
        provider.get_matrix(LOCATIONS)


def test_haversine_matrix_is_symmetric_with_zero_diagonal():
    locations = [
        Location(id="A", lat=0.0, lng=0.0),
        Location(id="B", lat=0.0, lng=1.0),
        Location(id="C", lat=0.0, lng=2.0),
    ]

    matrix = HaversineMatrixProvider(average_speed_kmh=40.0).get_matrix(locations)

    assert matrix.size == 3
    for i in range(3):
        assert matrix.cell(i, i) == Reachable(0, 0)
        for j in range(3):
            assert matrix.cell(i, j) == matrix.cell(j, i)
    one_degree = matrix.cell(0, 1)
    assert one_degree.distance_meters == pytest.approx(111195, rel=1e-3)
    assert one_degree.duration_seconds == pytest.approx(111.195 / 40 * 3600, rel=1e-3)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("google", GoogleDistanceMatrixProvider),
        ("osrm", OSRMTableProvider),
        ("haversine", HaversineMatrixProvider),
    ],
)
def test_dispatcher_selects_provider(name, expected):
    assert isinstance(get_provider(name), expected)


def test_dispatcher_rejects_unknown_provider():
    with pytest.raises(ValueError):
        get_provider("carrier-pigeon")
