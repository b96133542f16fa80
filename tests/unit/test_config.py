import pytest

from hasura_client.config import DEFAULT_API_URL, HasuraConfig, load_config


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("HASURA_GRAPHQL_URL", "https://hasura.internal/v1/graphql")
    monkeypatch.setenv("HASURA_GRAPHQL_ADMIN_SECRET", "from-env")

    config = load_config()

    assert config.api_url == "https://hasura.internal/v1/graphql"
    assert config.admin_secret == "from-env"
    assert config.validate()


def test_load_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("HASURA_GRAPHQL_URL", raising=False)
    monkeypatch.delenv("HASURA_GRAPHQL_ADMIN_SECRET", raising=False)
    monkeypatch.setattr("hasura_client.config.load_dotenv", lambda: False)

    config = load_config()

    assert config.api_url == DEFAULT_API_URL
    assert config.admin_secret == ""


def test_validate_lists_missing_settings() -> None:
    config = HasuraConfig(api_url="", admin_secret="")

    with pytest.raises(ValueError) as exc_info:
        config.validate()

    assert "HASURA_GRAPHQL_URL" in str(exc_info.value)
    assert "HASURA_GRAPHQL_ADMIN_SECRET" in str(exc_info.value)


def test_repr_hides_admin_secret() -> None:
    config = HasuraConfig(api_url="https://hasura.internal/v1/graphql", admin_secret="hunter2")

    assert "hunter2" not in repr(config)
