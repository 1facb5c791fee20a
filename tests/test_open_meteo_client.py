import unittest

import requests

from citytemp.app_types import Coordinates
from citytemp.data_sources import open_meteo_client
from citytemp.errors import GeocodingError, GeocodingErrorKind, WeatherError, WeatherErrorKind


class DummyResp:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return self._payload


class RecordingSession:
    def __init__(self, *responses):
        self._responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


BERLIN_GEOCODING = {
    "results": [
        {"latitude": 52.52, "longitude": 13.405, "name": "Berlin", "country": "Germany"},
    ]
}


class TestFetchCoordinates(unittest.TestCase):
    def setUp(self):
        self._orig_session = open_meteo_client.session

    def tearDown(self):
        open_meteo_client.session = self._orig_session

    def test_returns_first_result(self):
        session = RecordingSession(DummyResp(BERLIN_GEOCODING))
        open_meteo_client.session = session

        coords = open_meteo_client.fetch_coordinates("Berlin")
        self.assertEqual(coords, Coordinates(latitude=52.52, longitude=13.405, name="Berlin", country="Germany"))

        call = session.calls[0]
        self.assertEqual(call["url"], open_meteo_client.OPEN_METEO_GEOCODING_URL)
        self.assertEqual(call["params"], {"name": "Berlin", "count": 1, "language": "de", "format": "json"})
        self.assertEqual(call["timeout"], 10.0)

    def test_missing_country_becomes_empty_string(self):
        payload = {"results": [{"latitude": 1.0, "longitude": 2.0, "name": "Nowhere"}]}
        open_meteo_client.session = RecordingSession(DummyResp(payload))

        coords = open_meteo_client.fetch_coordinates("Nowhere")
        self.assertEqual(coords.country, "")

    def test_empty_or_absent_results_raise_city_not_found(self):
        for payload in ({}, {"results": []}, {"generationtime_ms": 0.5}):
            with self.subTest(payload=payload):
                open_meteo_client.session = RecordingSession(DummyResp(payload))
                with self.assertRaises(GeocodingError) as ctx:
                    open_meteo_client.fetch_coordinates("NotARealCityXYZ")
                self.assertIs(ctx.exception.kind, GeocodingErrorKind.CITY_NOT_FOUND)
                self.assertEqual(ctx.exception.message, 'Stadt "NotARealCityXYZ" wurde nicht gefunden')

    def test_http_error_status_raises_transport_error(self):
        open_meteo_client.session = RecordingSession(DummyResp({}, status_code=503))
        with self.assertRaises(GeocodingError) as ctx:
            open_meteo_client.fetch_coordinates("Berlin")
        self.assertIs(ctx.exception.kind, GeocodingErrorKind.TRANSPORT_ERROR)
        self.assertEqual(ctx.exception.message, "Geocoding API Fehler: 503")

    def test_http_error_status_is_logged(self):
        open_meteo_client.session = RecordingSession(DummyResp({}, status_code=503))
        with self.assertLogs("citytemp.data_sources.open_meteo_client", level="WARNING") as logs:
            with self.assertRaises(GeocodingError):
                open_meteo_client.fetch_coordinates("Berlin")
        self.assertIn("Geocoding request failed with status 503", logs.output[0])

    def test_result_without_coordinates_raises_city_not_found(self):
        for result in ({"name": "Berlin"}, {"name": "Berlin", "latitude": 52.52}):
            with self.subTest(result=result):
                open_meteo_client.session = RecordingSession(DummyResp({"results": [result]}))
                with self.assertRaises(GeocodingError) as ctx:
                    open_meteo_client.fetch_coordinates("Berlin")
                self.assertIs(ctx.exception.kind, GeocodingErrorKind.CITY_NOT_FOUND)

    def test_network_failure_raises_transport_error(self):
        open_meteo_client.session = RecordingSession(requests.ConnectionError("boom"))
        with self.assertRaises(GeocodingError) as ctx:
            open_meteo_client.fetch_coordinates("Berlin")
        self.assertIs(ctx.exception.kind, GeocodingErrorKind.TRANSPORT_ERROR)
        self.assertNotIn("boom", ctx.exception.message)


class TestFetchCitySuggestions(unittest.TestCase):
    def setUp(self):
        self._orig_session = open_meteo_client.session

    def tearDown(self):
        open_meteo_client.session = self._orig_session

    def test_returns_all_results_and_requests_count(self):
        payload = {
            "results": [
                {"latitude": 52.52, "longitude": 13.405, "name": "Berlin", "country": "Deutschland"},
                {"latitude": 39.9, "longitude": -79.0, "name": "Berlin"},
                {"name": "Broken"},
            ]
        }
        session = RecordingSession(DummyResp(payload))
        open_meteo_client.session = session

        suggestions = open_meteo_client.fetch_city_suggestions("Ber", count=5)
        self.assertEqual([s.name for s in suggestions], ["Berlin", "Berlin"])
        self.assertEqual(suggestions[1].country, "")
        self.assertEqual(session.calls[0]["params"]["count"], 5)

    def test_no_results_is_empty_list(self):
        open_meteo_client.session = RecordingSession(DummyResp({}))
        self.assertEqual(open_meteo_client.fetch_city_suggestions("Xyz"), [])


class TestFetchCurrentTemperature(unittest.TestCase):
    def setUp(self):
        self._orig_session = open_meteo_client.session

    def tearDown(self):
        open_meteo_client.session = self._orig_session

    def test_returns_temperature_unmodified(self):
        session = RecordingSession(DummyResp({"current": {"temperature_2m": 9.3}}))
        open_meteo_client.session = session

        self.assertEqual(open_meteo_client.fetch_current_temperature(52.52, 13.405), 9.3)
        self.assertEqual(
            session.calls[0]["params"],
            {"latitude": 52.52, "longitude": 13.405, "current": "temperature_2m"},
        )
        self.assertEqual(session.calls[0]["url"], open_meteo_client.OPEN_METEO_WEATHER_URL)

    def test_missing_field_raises_data_unavailable(self):
        for payload in ({}, {"current": {}}, {"current": {"time": "2024-01-01T12:00"}}):
            with self.subTest(payload=payload):
                open_meteo_client.session = RecordingSession(DummyResp(payload))
                with self.assertRaises(WeatherError) as ctx:
                    open_meteo_client.fetch_current_temperature(0, 0)
                self.assertIs(ctx.exception.kind, WeatherErrorKind.DATA_UNAVAILABLE)
                self.assertEqual(ctx.exception.message, "Keine Wetterdaten verfügbar")

    def test_http_error_status_raises_transport_error(self):
        open_meteo_client.session = RecordingSession(DummyResp({}, status_code=500))
        with self.assertRaises(WeatherError) as ctx:
            open_meteo_client.fetch_current_temperature(0, 0)
        self.assertIs(ctx.exception.kind, WeatherErrorKind.TRANSPORT_ERROR)
        self.assertEqual(ctx.exception.message, "Weather API Fehler: 500")

    def test_timeout_raises_transport_error(self):
        open_meteo_client.session = RecordingSession(requests.Timeout("slow"))
        with self.assertLogs("citytemp.data_sources.open_meteo_client", level="WARNING") as logs:
            with self.assertRaises(WeatherError) as ctx:
                open_meteo_client.fetch_current_temperature(0, 0)
        self.assertIs(ctx.exception.kind, WeatherErrorKind.TRANSPORT_ERROR)
        self.assertIn("Weather request did not complete: slow", logs.output[0])


if __name__ == "__main__":
    unittest.main()
