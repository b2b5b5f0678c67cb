import contextlib
import io
import json
import unittest

from proxysig.cli import main


class Tests(unittest.TestCase):
    def run_cli(self, *argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main(list(argv))
        return status, stdout.getvalue().strip()

    def setUp(self):
        _, output = self.run_cli("keygen")
        self.original = json.loads(output)
        _, output = self.run_cli("keygen")
        self.proxy = json.loads(output)

        status, output = self.run_cli(
            "delegate", "--private-key", self.original["private_key"], "--weight", "3"
        )
        self.assertEqual(status, 0)
        self.delegation = output

        status, output = self.run_cli(
            "sign",
            "--message",
            "Test message",
            "--private-key",
            self.proxy["private_key"],
            "--delegation",
            self.delegation,
        )
        self.assertEqual(status, 0)
        self.signature = json.loads(output)["signature"]

    def verify(self, message="Test message", proxy_public_key=None):
        return self.run_cli(
            "verify",
            "--message",
            message,
            "--proxy-public-key",
            proxy_public_key or self.proxy["public_key"],
            "--original-public-key",
            self.original["public_key"],
            "--signature",
            self.signature,
            "--delegation",
            self.delegation,
        )

    def test_keygen(self):
        self.assertEqual(len(bytes.fromhex(self.original["private_key"])), 32)
        self.assertEqual(len(bytes.fromhex(self.original["public_key"])), 33)

    def test_delegate(self):
        delegation = json.loads(self.delegation)
        self.assertEqual(delegation["weight"], 3)
        self.assertEqual(set(delegation), {"warrant_point", "s", "weight"})

    def test_check_identity(self):
        self.assertEqual(
            self.run_cli(
                "check-identity",
                "--delegation",
                self.delegation,
                "--public-key",
                self.original["public_key"],
            ),
            (0, "valid"),
        )
        self.assertEqual(
            self.run_cli(
                "check-identity",
                "--delegation",
                self.delegation,
                "--public-key",
                self.proxy["public_key"],
            ),
            (1, "invalid"),
        )

    def test_verify(self):
        self.assertEqual(self.verify(), (0, "valid"))
        self.assertEqual(self.verify(message="Wrong test message"), (1, "invalid"))
        self.assertEqual(
            self.verify(proxy_public_key=self.original["public_key"]), (1, "invalid")
        )

    def test_malformed_input(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                main(["delegate", "--private-key", "not-hex", "--weight", "1"])
        self.assertEqual(context.exception.code, 2)

        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                main(
                    [
                        "check-identity",
                        "--delegation",
                        "{}",
                        "--public-key",
                        self.original["public_key"],
                    ]
                )
        self.assertEqual(context.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
