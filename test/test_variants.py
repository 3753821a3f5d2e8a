import unittest

from idtech4_master.protocol import ProtocolVariant


class TestProtocolVariant(unittest.TestCase):
    def test_default_hosts(self):
        self.assertEqual(ProtocolVariant.DOOM3_PREY.default_host, "idnet.ua-corp.com")
        self.assertEqual(ProtocolVariant.DHEWM3.default_host, "idnet.ua-corp.com")
        self.assertEqual(ProtocolVariant.QUAKE4.default_host, "q4master.idsoftware.com")

    def test_labels(self):
        self.assertEqual(ProtocolVariant.DOOM3_PREY.label, "Doom 3 / Prey")
        self.assertEqual(ProtocolVariant.QUAKE4.label, "Quake 4")
        self.assertEqual(ProtocolVariant.DHEWM3.label, "DHEWM3")

    def test_from_selector(self):
        for value in (0, 1, 2):
            variant, coerced = ProtocolVariant.from_selector(value)
            self.assertEqual(int(variant), value)
            self.assertFalse(coerced)

    def test_unknown_selector_falls_back(self):
        for value in (-1, 3, 99):
            variant, coerced = ProtocolVariant.from_selector(value)
            self.assertIs(variant, ProtocolVariant.DOOM3_PREY)
            self.assertTrue(coerced)
