"""Tests for the agent configuration registry."""

import logging

import pytest

from core.models import AgentConfig, AgentSummary
from core.registry import AgentNotFoundError, AgentRegistry, factory_kwargs, tool_name


def get_weather(city: str) -> str:
    return city


class NamedTool:
    name = "named_tool"


class FakeFactory:
    """Records every call and returns a fresh object per agent."""

    def __init__(self):
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return {"agent_for": kwargs["name"], "call": len(self.calls)}


def make_config(name="weather-agent", **overrides):
    fields = dict(
        name=name,
        description="天气查询 Agent",
        system_prompt="你是天气助手。",
        tools=[get_weather],
        model="fake-model",
    )
    fields.update(overrides)
    return AgentConfig(**fields)


@pytest.fixture
def factory():
    return FakeFactory()


@pytest.fixture
def registry(factory):
    return AgentRegistry(factory=factory)


class TestRegister:
    """register() builds once and stores config + agent together."""

    def test_factory_called_once_and_agent_returned(self, registry, factory):
        agent = registry.register(make_config())

        assert len(factory.calls) == 1
        assert registry.get("weather-agent") is agent
        assert registry.get_config("weather-agent") == make_config()

    def test_required_fields_forwarded(self, registry, factory):
        registry.register(make_config())

        assert factory.calls[0] == {
            "name": "weather-agent",
            "description": "天气查询 Agent",
            "model": "fake-model",
            "system_prompt": "你是天气助手。",
            "tools": [get_weather],
        }

    def test_absent_optional_fields_not_forwarded(self, registry, factory):
        registry.register(make_config())

        for key in ("subagents", "skills", "backend"):
            assert key not in factory.calls[0]

    def test_present_optional_fields_forwarded(self, registry, factory):
        backend = object()
        registry.register(make_config(skills=["/app/skills"], backend=backend, subagents=[]))

        call = factory.calls[0]
        assert call["skills"] == ["/app/skills"]
        assert call["backend"] is backend
        assert call["subagents"] == []

    def test_registration_is_logged(self, registry, caplog):
        with caplog.at_level(logging.INFO):
            registry.register(make_config())

        assert "[AgentRegistry] Registered agent: weather-agent" in caplog.text

    def test_duplicate_name_last_write_wins(self, registry, factory):
        registry.register(make_config(description="first"))
        second = registry.register(make_config(description="second"))

        assert registry.get("weather-agent") is second
        assert registry.get_config("weather-agent").description == "second"
        assert registry.list_names() == ["weather-agent"]
        assert len(factory.calls) == 2

    def test_reregistered_name_keeps_position(self, registry):
        registry.register(make_config("a"))
        registry.register(make_config("b"))
        registry.register(make_config("a"))

        assert registry.list_names() == ["a", "b"]


class TestLookup:
    def test_missing_name_lists_available(self, registry):
        registry.register(make_config("weather-agent"))
        registry.register(make_config("travel-agent"))

        with pytest.raises(AgentNotFoundError) as exc_info:
            registry.get("nonexistent")

        error = exc_info.value
        assert error.name == "nonexistent"
        assert error.available == ["weather-agent", "travel-agent"]
        assert str(error) == 'Agent "nonexistent" not found. Available: weather-agent, travel-agent'

    def test_not_found_is_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.get("nonexistent")

    def test_get_config_miss_returns_none(self, registry):
        assert registry.get_config("nonexistent") is None

    def test_list_names_in_registration_order(self, registry):
        for name in ("c", "a", "b"):
            registry.register(make_config(name))

        assert registry.list_names() == ["c", "a", "b"]
        assert len(registry) == 3
        assert "a" in registry

    def test_list_all_projects_configs(self, registry):
        registry.register(make_config(tools=[get_weather, NamedTool()]))

        assert registry.list_all() == [
            AgentSummary(
                name="weather-agent",
                description="天气查询 Agent",
                tools=["get_weather", "named_tool"],
            )
        ]


class TestRemove:
    def test_remove_drops_agent_and_config(self, registry):
        registry.register(make_config())
        registry.remove("weather-agent")

        assert registry.get_config("weather-agent") is None
        assert registry.list_names() == []
        with pytest.raises(AgentNotFoundError):
            registry.get("weather-agent")

    def test_remove_unknown_is_noop(self, registry):
        registry.register(make_config())
        registry.remove("nonexistent")

        assert registry.list_names() == ["weather-agent"]


class TestHelpers:
    def test_factory_kwargs_copies_tools(self):
        config = make_config()
        assert factory_kwargs(config)["tools"] is not config.tools

    def test_tool_name_fallbacks(self):
        assert tool_name(get_weather) == "get_weather"
        assert tool_name(NamedTool()) == "named_tool"
        assert tool_name(object()) == "object"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            make_config(name="")
