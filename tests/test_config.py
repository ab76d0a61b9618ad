"""Unit tests for tasklist.core.config: defaults and validators."""

import unittest

from pydantic import SecretStr, ValidationError

from tasklist.core.config import MAX_TOKEN_MINUTES, Settings


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestJwtSettings(unittest.TestCase):

    def test_seven_day_maximum(self) -> None:
        self.assertEqual(MAX_TOKEN_MINUTES, 10080)
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=10080).JWT_EXPIRE_MINUTES, 10080)

    def test_expire_minutes_out_of_range(self) -> None:
        for value in (0, 10081):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    _settings(JWT_EXPIRE_MINUTES=value)

    def test_blank_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET=SecretStr("   "))

    def test_secret_not_in_repr(self) -> None:
        settings = _settings(JWT_SECRET=SecretStr("super-secret-value"))
        self.assertNotIn("super-secret-value", repr(settings))

    def test_algorithm_stripped(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM=" HS256 ").JWT_ALGORITHM, "HS256")


class TestLoggingSettings(unittest.TestCase):

    def test_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_unknown_level_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="loud")

    def test_blank_log_dir_is_none(self) -> None:
        self.assertIsNone(_settings(LOG_DIR="  ").LOG_DIR)


class TestServerSettings(unittest.TestCase):

    def test_port_range(self) -> None:
        self.assertEqual(_settings(PORT=4000).PORT, 4000)
        with self.assertRaises(ValidationError):
            _settings(PORT=0)

    def test_app_env_literal(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(APP_ENV="staging")


if __name__ == "__main__":
    unittest.main()
