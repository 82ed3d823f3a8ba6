import pytest

from orderdesk import create_app, ConfigError
from orderdesk.config import normalize_db_url, validate_config


class TestNormalizeDbUrl:

    def test_none_and_blank(self):
        assert normalize_db_url(None) is None
        assert normalize_db_url("   ") is None

    def test_postgres_scheme_rewritten(self):
        assert normalize_db_url("postgres://u:p@db.example.com:5432/app") == \
            "postgresql+psycopg2://u:p@db.example.com:5432/app"

    def test_whitespace_stripped(self):
        assert normalize_db_url("  sqlite:///x.db\n") == "sqlite:///x.db"

    def test_other_schemes_untouched(self):
        assert normalize_db_url("postgresql+psycopg2://u@h/d") == "postgresql+psycopg2://u@h/d"


class TestValidateConfig:

    def test_missing_database_url_fails_fast(self):
        with pytest.raises(ConfigError, match="DATABASE_URL is required"):
            create_app({"SQLALCHEMY_DATABASE_URI": None})

    def test_malformed_database_url_fails_fast(self):
        with pytest.raises(ConfigError, match="malformed"):
            create_app({"SQLALCHEMY_DATABASE_URI": "definitely not a url"})

    def test_bad_port(self):
        with pytest.raises(ConfigError, match="PORT"):
            validate_config({"SQLALCHEMY_DATABASE_URI": "sqlite://", "PORT": 0})

    def test_normalizes_in_place(self):
        config = {"SQLALCHEMY_DATABASE_URI": " postgres://u@h/d ", "PORT": 5000}
        validate_config(config)
        assert config["SQLALCHEMY_DATABASE_URI"] == "postgresql+psycopg2://u@h/d"

