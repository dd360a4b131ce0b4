"""Unit tests for ServerConfig parsing and the static tool catalog."""
import pytest

from core.catalog import GET_COCKTAIL, get_tool, list_tools
from core.config import DEFAULT_BASE_URL, ServerConfig


def test_config_defaults():
    config = ServerConfig.from_env({})
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout_sec == 10.0
    assert config.log_level == "INFO"
    assert config.search_url == "https://www.thecocktaildb.com/api/json/v1/1/search.php"


def test_config_from_env_overrides():
    config = ServerConfig.from_env({
        "COCKTAILDB_BASE_URL": "http://localhost:9000/api/",
        "COCKTAILDB_TIMEOUT": "2.5",
        "LOG_LEVEL": "debug",
    })
    assert config.search_url == "http://localhost:9000/api/search.php"
    assert config.timeout_sec == 2.5
    assert config.log_level == "DEBUG"


def test_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv("COCKTAILDB_TIMEOUT", "3")
    assert ServerConfig.from_env().timeout_sec == 3.0


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_config_rejects_bad_timeout(value):
    with pytest.raises(ValueError, match="COCKTAILDB_TIMEOUT"):
        ServerConfig.from_env({"COCKTAILDB_TIMEOUT": value})


def test_catalog_has_exactly_one_tool():
    tools = list_tools()
    assert tools == [GET_COCKTAIL]
    assert tools[0].to_dict() == {
        "name": "get_cocktail",
        "description": "Search for cocktail recipes by name",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Cocktail name to search for"},
            },
            "required": ["name"],
        },
    }


def test_catalog_lookup():
    assert get_tool("get_cocktail") is GET_COCKTAIL
    assert get_tool("get_drink") is None


def test_list_tools_returns_fresh_list():
    tools = list_tools()
    tools.clear()
    assert list_tools() == [GET_COCKTAIL]
