from portal.core.config import Settings


def test_cors_origins_accept_comma_separated_string():
    settings = Settings(cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_cors_origins_accept_json_list():
    settings = Settings(cors_origins='["http://a.test"]')

    assert settings.cors_origins == ["http://a.test"]


def test_environment_is_normalized():
    assert Settings(environment=" Production ").environment == "production"
