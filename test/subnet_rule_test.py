import sys
import os
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ipauth.rules import SubnetCheck
from ipauth.data import parse_address
from ipauth.errors import ConfigurationError

class TestSubnetRule(unittest.TestCase):

    def matches(self, rule, text):
        return rule.matches(parse_address(text))

    def test_match_16(self):
        rule = SubnetCheck("172.24.0.0", 16)
        self.assertTrue(self.matches(rule, "172.24.0.0"))
        self.assertTrue(self.matches(rule, "172.24.4.4"))
        self.assertTrue(self.matches(rule, "172.24.255.255"))
        self.assertFalse(self.matches(rule, "172.18.4.4"))
        self.assertFalse(self.matches(rule, "192.0.1.4"))
        self.assertFalse(self.matches(rule, "172.35.4.4"))

    def test_match_14(self):
        rule = SubnetCheck("192.143.0.0", 14)
        self.assertTrue(self.matches(rule, "192.143.4.4"))
        self.assertTrue(self.matches(rule, "192.145.0.0"))
        self.assertFalse(self.matches(rule, "192.149.1.4"))
        self.assertFalse(self.matches(rule, "192.142.255.255"))

    def test_match_8(self):
        rule = SubnetCheck("10.0.0.0", 8)
        self.assertTrue(self.matches(rule, "10.200.3.4"))
        self.assertFalse(self.matches(rule, "11.0.0.0"))

    def test_match_24(self):
        rule = SubnetCheck("172.16.1.0", 24)
        self.assertTrue(self.matches(rule, "172.16.1.50"))
        self.assertFalse(self.matches(rule, "172.16.2.50"))

    def test_match_28(self):
        rule = SubnetCheck("192.168.10.48", 28)
        self.assertTrue(self.matches(rule, "192.168.10.48"))
        self.assertTrue(self.matches(rule, "192.168.10.60"))
        self.assertFalse(self.matches(rule, "192.168.10.47"))
        self.assertFalse(self.matches(rule, "192.168.10.70"))

    def test_match_30(self):
        rule = SubnetCheck("10.0.0.4", 30)
        self.assertTrue(self.matches(rule, "10.0.0.4"))
        self.assertTrue(self.matches(rule, "10.0.0.7"))
        self.assertFalse(self.matches(rule, "10.0.0.3"))
        self.assertFalse(self.matches(rule, "10.0.0.9"))

    def test_border_bound_is_inclusive_and_additive(self):
        ## The upper bound is network octet + block size, one past the last host of the block
        rule = SubnetCheck("192.168.10.0", 28)
        self.assertTrue(self.matches(rule, "192.168.10.16"))
        self.assertFalse(self.matches(rule, "192.168.10.17"))

        ## Non-zero host bits in the network address shift the range instead of being masked off
        rule = SubnetCheck("192.168.10.5", 28)
        self.assertFalse(self.matches(rule, "192.168.10.0"))
        self.assertTrue(self.matches(rule, "192.168.10.21"))

    def test_host_bits_ignored_after_border(self):
        rule = SubnetCheck("10.1.0.0", 12)
        self.assertTrue(self.matches(rule, "10.1.99.200"))

    def test_invalid_network_address(self):
        for network in ["300.300.0.0", "random string", "", None]:
            with self.assertRaises(ConfigurationError) as ctx:
                SubnetCheck(network, 16)
            self.assertEqual(ctx.exception.field, "network_address")

    def test_invalid_mask(self):
        for mask in [7, 31, 0, 32, "16", "Nan", 16.0, True, None]:
            with self.assertRaises(ConfigurationError) as ctx:
                SubnetCheck("132.32.2.2", mask)
            self.assertEqual(ctx.exception.field, "mask_bits")

    def test_mask_limits(self):
        self.assertEqual(SubnetCheck("10.0.0.0", 8).mask_bits, 8)
        self.assertEqual(SubnetCheck("10.0.0.0", 30).mask_bits, 30)
