import unittest
import datetime
from unittest.mock import MagicMock, patch

import requests

from timeboard.clockify import ClockifyClient, NetworkOrAuthFailure, format_instant
from timeboard.models import MalformedEntryError, TimeEntry, parse_iso_duration
from timeboard.projects import NO_PROJECT, ProjectDirectory

UTC = datetime.timezone.utc


def fake_response(payload, status=200):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.json.return_value = payload
    return response


ENTRY = {
    "id": "e1",
    "projectId": "p1",
    "description": "Write report",
    "timeInterval": {
        "start": "2025-03-12T09:40:00Z",
        "end": "2025-03-12T11:10:00Z",
        "duration": "PT1H30M",
    },
}


class TestModels(unittest.TestCase):
    def test_parse_iso_duration(self):
        self.assertEqual(parse_iso_duration("PT1H30M"), 5400)
        self.assertEqual(parse_iso_duration("PT45S"), 45)
        self.assertEqual(parse_iso_duration("PT0S"), 0)
        self.assertEqual(parse_iso_duration("P1DT2H"), 93600)
        self.assertEqual(parse_iso_duration(None), 0)

    def test_parse_iso_duration_rejects_garbage(self):
        for value in ("1h", "PT", "PT1X"):
            with self.subTest(value=value):
                with self.assertRaises(MalformedEntryError):
                    parse_iso_duration(value)

    def test_entry_from_api(self):
        entry = TimeEntry.from_api(ENTRY)
        self.assertEqual(entry.project_id, "p1")
        self.assertEqual(entry.start, datetime.datetime(2025, 3, 12, 9, 40, tzinfo=UTC))
        self.assertEqual(entry.duration_seconds, 5400)
        self.assertEqual(entry.duration_hours, 1.5)

    def test_running_entry_has_zero_duration(self):
        running = {"id": "e2", "timeInterval": {"start": "2025-03-12T09:40:00Z", "end": None, "duration": None}}
        entry = TimeEntry.from_api(running)
        self.assertEqual(entry.end, entry.start)
        self.assertEqual(entry.duration_seconds, 0)
        self.assertIsNone(entry.project_id)
        self.assertEqual(entry.description, "")

    def test_missing_start_is_malformed(self):
        with self.assertRaises(MalformedEntryError):
            TimeEntry.from_api({"id": "e3", "timeInterval": {}})


class TestClockifyClient(unittest.TestCase):
    def setUp(self):
        self.client = ClockifyClient("key", base_url="https://example.test/api/v1/")

    def test_format_instant_is_utc(self):
        moment = datetime.datetime(2025, 3, 12, 1, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
        self.assertEqual(format_instant(moment), "2025-03-11T23:00:00Z")

    @patch("timeboard.clockify.requests.get")
    def test_get_time_entries(self, mock_get):
        mock_get.return_value = fake_response([ENTRY, {"no": "id"}])
        start = datetime.datetime(2025, 3, 12, tzinfo=UTC)
        entries = self.client.get_time_entries("ws", "u1", start, start + datetime.timedelta(days=1))

        self.assertEqual([e.id for e in entries], ["e1"])
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://example.test/api/v1/workspaces/ws/user/u1/time-entries")
        self.assertEqual(kwargs["headers"]["X-Api-Key"], "key")
        self.assertEqual(kwargs["params"], {
            "start": "2025-03-12T00:00:00Z",
            "end": "2025-03-13T00:00:00Z",
            "page": 1,
            "page-size": 1000,
        })

    @patch("timeboard.clockify.requests.get")
    def test_http_error_raises(self, mock_get):
        mock_get.return_value = fake_response({"message": "nope"}, status=401)
        with self.assertRaises(NetworkOrAuthFailure) as ctx:
            self.client.get_projects("ws")
        self.assertEqual(ctx.exception.status_code, 401)

    @patch("timeboard.clockify.requests.get")
    def test_connection_error_raises(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("down")
        with self.assertRaises(NetworkOrAuthFailure):
            self.client.get_projects("ws")

    @patch("timeboard.clockify.requests.get")
    def test_empty_result_is_not_an_error(self, mock_get):
        mock_get.return_value = fake_response([])
        start = datetime.datetime(2025, 3, 12, tzinfo=UTC)
        self.assertEqual(self.client.get_time_entries("ws", "u1", start, start), [])


class TestProjectDirectory(unittest.TestCase):
    @patch("timeboard.clockify.requests.get")
    def test_load(self, mock_get):
        mock_get.return_value = fake_response([{"id": "p1", "name": "Alpha"}, {"id": "p2", "name": "Beta"}])
        directory = ProjectDirectory.load(ClockifyClient("key"), "ws")
        self.assertTrue(directory.available)
        self.assertEqual(directory.resolve("p2"), "Beta")
        self.assertEqual(directory.resolve("missing"), NO_PROJECT)
        self.assertEqual(directory.resolve(None), NO_PROJECT)

    @patch("timeboard.clockify.requests.get")
    def test_failure_is_distinguishable(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")
        directory = ProjectDirectory.load(ClockifyClient("key"), "ws")
        self.assertFalse(directory.available)
        self.assertIn("slow", directory.result.cause)
        self.assertEqual(directory.resolve("p1"), NO_PROJECT)


if __name__ == "__main__":
    unittest.main()
