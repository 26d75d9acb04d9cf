import sys
import os
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ipauth import AuthChain, Policy, Mode, Accepted, Denied, PassThrough, DenyReason, ConfigurationError

class AlwaysPass:
    name = "always-pass"

    async def authenticate(self, client_address):
        return Accepted("always-pass")

class AlwaysFail:
    name = "always-fail"

    async def authenticate(self, client_address):
        return Denied(DenyReason.FORBIDDEN, message="Access denied")

class AlwaysForward:
    name = "always-forward"

    async def authenticate(self, client_address):
        return PassThrough()


class TestAuthChain(unittest.IsolatedAsyncioTestCase):

    async def test_forward_then_pass(self):
        chain = AuthChain([Policy(network_address="172.24.0.0", mask_bits=16, mode=Mode.FORWARD_TO_NEXT, name="ip"), AlwaysPass()])

        outcome, name = await chain.authenticate("172.24.4.4")
        self.assertEqual(outcome, Accepted("always-pass"))
        self.assertEqual(name, "always-pass")

        outcome, name = await chain.authenticate("172.18.4.4")
        self.assertEqual(outcome.message, "Forbidden access")
        self.assertEqual(name, "ip")

        outcome, name = await chain.authenticate("30.3.0.300")
        self.assertEqual(outcome.reason, DenyReason.INVALID_ADDRESS)
        self.assertEqual(name, "ip")

    async def test_terminate_skips_next(self):
        chain = AuthChain([Policy(network_address="192.143.0.0", mask_bits=16, mode=Mode.TERMINATE_CHAIN, name="ip"), AlwaysFail()])

        outcome, name = await chain.authenticate("192.143.4.4")
        self.assertEqual(outcome, Accepted("192.143.4.4"))
        self.assertEqual(name, "ip")

        outcome, name = await chain.authenticate("192.149.1.4")
        self.assertEqual(outcome.message, "Forbidden access")

    async def test_forward_then_fail(self):
        chain = AuthChain([Policy(network_address="192.168.0.0", mask_bits=16, name="ip"), AlwaysFail()])

        outcome, name = await chain.authenticate("192.168.4.4")
        self.assertEqual(outcome.message, "Access denied")
        self.assertEqual(name, "always-fail")

        outcome, name = await chain.authenticate("172.35.4.4")
        self.assertEqual(outcome.message, "Forbidden access")
        self.assertEqual(name, "ip")

    async def test_everyone_forwards(self):
        chain = AuthChain([Policy(allow_list=["10.0.0.1"]), AlwaysForward()])
        outcome, name = await chain.authenticate("10.0.0.1")
        self.assertTrue(outcome.denied)
        self.assertEqual(outcome.message, "Missing authentication")
        self.assertIsNone(name)

    def test_empty_chain(self):
        with self.assertRaises(ConfigurationError):
            AuthChain([])
