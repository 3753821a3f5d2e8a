import io
import json
import tempfile
import unittest
from ipaddress import IPv4Address
from pathlib import Path

from idtech4_master.protocol import ProtocolVariant, ServerEntry
from idtech4_master.query import QueryConfig, QueryResult
from idtech4_master.reporting import ConsoleReporter, JsonReporter


def make_result(config, servers):
    return QueryResult(
        host=config.host,
        port=config.port,
        variant=config.variant,
        mod=config.mod,
        address="192.0.2.1",
        servers=servers,
        duration_ms=42,
    )


class TestConsoleReporter(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.reporter = ConsoleReporter(file=self.out)
        self.config = QueryConfig(variant=ProtocolVariant.QUAKE4, mod="q4ctf")

    def test_banner(self):
        self.reporter.print_banner(self.config)
        text = self.out.getvalue()
        self.assertIn("- MasterServer Address: q4master.idsoftware.com", text)
        self.assertIn("- Port: 27650", text)
        self.assertIn("- Protocol: Quake 4", text)
        self.assertIn("- Mod: q4ctf", text)

    def test_banner_reports_coercion(self):
        self.reporter.print_banner(QueryConfig(), protocol_coerced=True)
        self.assertIn("Unknown choice, reverting to Doom3 / Prey.", self.out.getvalue())

    def test_result_lines(self):
        servers = [ServerEntry(IPv4Address("127.0.0.1"), 37428), ServerEntry(IPv4Address("10.0.0.2"), 27666)]
        self.reporter.print_result(make_result(self.config, servers))
        self.assertEqual(
            self.out.getvalue().splitlines(),
            ["127.0.0.1:37428", "10.0.0.2:27666", "There are 2 servers found."],
        )


class TestJsonReporter(unittest.TestCase):
    def setUp(self):
        self.reporter = JsonReporter()
        self.config = QueryConfig(host="master.example.org")

    def test_success_report(self):
        result = make_result(self.config, [ServerEntry(IPv4Address("127.0.0.1"), 37428)])
        report = self.reporter.generate(self.config, result)
        self.assertTrue(report["success"])
        self.assertEqual(report["count"], 1)
        self.assertEqual(report["servers"], [{"ip": "127.0.0.1", "port": 37428}])
        self.assertEqual(report["master"], {"host": "master.example.org", "address": "192.0.2.1", "port": 27650})
        self.assertEqual(report["protocol"], {"id": 0, "name": "Doom 3 / Prey"})
        self.assertEqual(report["duration_ms"], 42)
        self.assertIsNone(report["error"])

    def test_failure_report(self):
        report = self.reporter.generate(self.config, None, error="read timeout: timed out", duration_ms=3001)
        self.assertFalse(report["success"])
        self.assertEqual(report["count"], 0)
        self.assertEqual(report["servers"], [])
        self.assertEqual(report["duration_ms"], 3001)
        self.assertEqual(report["error"], "read timeout: timed out")

    def test_save(self):
        report = self.reporter.generate(self.config, None, error="boom")
        with tempfile.TemporaryDirectory() as tmp:
            path = self.reporter.save(report, Path(tmp) / "reports" / "master.json")
            with open(path, encoding="utf-8") as f:
                self.assertEqual(json.load(f)["error"], "boom")

    def test_to_json_string(self):
        report = {"count": 0}
        self.assertEqual(self.reporter.to_json_string(report, pretty=False), '{"count": 0}')

    def test_save_matches_pretty_string(self):
        report = self.reporter.generate(self.config, None, error="boom")
        with tempfile.TemporaryDirectory() as tmp:
            path = self.reporter.save(report, Path(tmp) / "master.json")
            text = path.read_text(encoding="utf-8")
        self.assertEqual(text, self.reporter.to_json_string(report) + "\n")

    def test_non_json_values_become_strings(self):
        report = {"address": IPv4Address("192.0.2.1"), "mod": "modœ"}
        self.assertEqual(
            self.reporter.to_json_string(report, pretty=False),
            '{"address": "192.0.2.1", "mod": "modœ"}',
        )
