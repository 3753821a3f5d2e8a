import tempfile
import unittest
from pathlib import Path

from idtech4_master.config import build_query_config, load_config_file, parse_config_data
from idtech4_master.protocol import ProtocolVariant


class TestLoadConfigFile(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, text, name="master.yaml"):
        path = Path(self.tmpdir.name) / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_load(self):
        path = self.write("host: master.example.org\nport: 27651\nprotocol: 1\nmod: q4ctf\nread_timeout: 5\n")
        settings = load_config_file(path)
        self.assertEqual(settings, {
            "host": "master.example.org",
            "port": 27651,
            "protocol": 1,
            "mod": "q4ctf",
            "read_timeout": 5,
        })

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config_file(Path(self.tmpdir.name) / "missing.yaml")

    def test_empty_file(self):
        with self.assertRaises(ValueError):
            load_config_file(self.write(""))

    def test_invalid_yaml(self):
        with self.assertRaises(ValueError):
            load_config_file(self.write("host: [unclosed\n"))

    def test_not_a_mapping(self):
        with self.assertRaises(ValueError):
            load_config_file(self.write("- host\n- port\n"))


class TestParseConfigData(unittest.TestCase):
    def test_unknown_key(self):
        with self.assertRaises(ValueError) as ctx:
            parse_config_data({"hostname": "x"})
        self.assertIn("hostname", str(ctx.exception))

    def test_wrong_type(self):
        with self.assertRaises(ValueError):
            parse_config_data({"port": "27650"})
        with self.assertRaises(ValueError):
            parse_config_data({"protocol": True})

    def test_port_range(self):
        with self.assertRaises(ValueError):
            parse_config_data({"port": 70000})

    def test_timeouts_positive(self):
        with self.assertRaises(ValueError):
            parse_config_data({"read_timeout": 0})

    def test_null_values_skipped(self):
        self.assertEqual(parse_config_data({"mod": None, "port": 1}), {"port": 1})


class TestBuildQueryConfig(unittest.TestCase):
    def test_defaults(self):
        loaded = build_query_config()
        self.assertEqual(loaded.query.host, "idnet.ua-corp.com")
        self.assertEqual(loaded.query.port, 27650)
        self.assertIs(loaded.query.variant, ProtocolVariant.DOOM3_PREY)
        self.assertFalse(loaded.protocol_coerced)

    def test_overrides_beat_file(self):
        loaded = build_query_config(
            {"host": "file.example.org", "port": 1234, "mod": "base"},
            host="cli.example.org", port=None, mod=None,
        )
        self.assertEqual(loaded.query.host, "cli.example.org")
        self.assertEqual(loaded.query.port, 1234)
        self.assertEqual(loaded.query.mod, "base")

    def test_quake4_selects_default_host(self):
        loaded = build_query_config(protocol=1)
        self.assertIs(loaded.query.variant, ProtocolVariant.QUAKE4)
        self.assertEqual(loaded.query.host, "q4master.idsoftware.com")

    def test_unknown_protocol_is_coerced(self):
        loaded = build_query_config(protocol=7)
        self.assertIs(loaded.query.variant, ProtocolVariant.DOOM3_PREY)
        self.assertTrue(loaded.protocol_coerced)
        self.assertEqual(loaded.requested_protocol, 7)
        self.assertEqual(loaded.query.host, "idnet.ua-corp.com")

    def test_timeouts(self):
        loaded = build_query_config({"connect_timeout": 1}, read_timeout=0.5)
        self.assertEqual(loaded.query.connect_timeout, 1.0)
        self.assertEqual(loaded.query.read_timeout, 0.5)
