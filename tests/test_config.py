import unittest
from pathlib import Path

from drivetransfer.config import (
    DEFAULT_CREDENTIALS_FILE,
    DEFAULT_PUBLIC_DIR,
    DEFAULT_TOKEN_FILE,
    Settings,
)
from drivetransfer.errors import ConfigurationError


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        self.assertEqual(settings.credentials_file, DEFAULT_CREDENTIALS_FILE)
        self.assertEqual(settings.token_file, DEFAULT_TOKEN_FILE)
        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.base_url, "http://localhost:3000")
        self.assertIsNone(settings.redirect_uri)
        self.assertEqual(settings.public_dir, DEFAULT_PUBLIC_DIR)
        self.assertTrue(settings.open_browser)
        self.assertEqual(settings.log_level, "INFO")

    def test_packaged_front_end_exists(self) -> None:
        self.assertTrue((DEFAULT_PUBLIC_DIR / "index.html").is_file())

    def test_environment_overrides(self) -> None:
        settings = Settings.from_env(
            {
                "DRIVETRANSFER_CREDENTIALS_FILE": "/etc/dt/client.json",
                "DRIVETRANSFER_TOKEN_FILE": "/var/dt/token.json",
                "DRIVETRANSFER_HOST": "127.0.0.1",
                "DRIVETRANSFER_PORT": "8080",
                "DRIVETRANSFER_REDIRECT_URI": "http://127.0.0.1:8080/oauth",
                "DRIVETRANSFER_OPEN_BROWSER": "false",
                "DRIVETRANSFER_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(settings.credentials_file, Path("/etc/dt/client.json"))
        self.assertEqual(settings.token_file, Path("/var/dt/token.json"))
        self.assertEqual(settings.base_url, "http://127.0.0.1:8080")
        self.assertEqual(settings.redirect_uri, "http://127.0.0.1:8080/oauth")
        self.assertFalse(settings.open_browser)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_blank_values_fall_back_to_defaults(self) -> None:
        settings = Settings.from_env({"DRIVETRANSFER_HOST": "  ", "DRIVETRANSFER_PORT": ""})
        self.assertEqual(settings.host, "localhost")
        self.assertEqual(settings.port, 3000)

    def test_invalid_port(self) -> None:
        with self.assertRaises(ConfigurationError):
            Settings.from_env({"DRIVETRANSFER_PORT": "http"})
        with self.assertRaises(ConfigurationError):
            Settings.from_env({"DRIVETRANSFER_PORT": "70000"})


if __name__ == "__main__":
    unittest.main()
