import unittest
import sys
from pathlib import Path

# Ensure src is in path for local testing
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import securechannel

class TestSecureChannelPackage(unittest.TestCase):
    def test_package_structure(self):
        """Test that the package exposes the expected API."""
        for name in securechannel.__all__:
            self.assertTrue(hasattr(securechannel, name), name)

    def test_basic_flow(self):
        """Test a sign / verify / recover flow using the public API."""
        signer = securechannel.Party(683, 811, 3)
        checker = securechannel.Party(683, 811, 13)
        receiver = securechannel.Party(683, 811, 5)

        sig = signer.sign(7, 11)
        self.assertTrue(checker.check_sign(7, sig, signer.public_param()))
        self.assertEqual(receiver.recover_message(7, sig, 3), 11)
        self.assertEqual(receiver.recover_message(7, sig, 13), 0)

    def test_result_type_flow(self):
        result = securechannel.create_party(4, 9, 5)
        self.assertFalse(result.success)
        self.assertIsInstance(result.error, securechannel.ParameterError)

if __name__ == "__main__":
    unittest.main()
