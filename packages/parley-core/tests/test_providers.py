"""Tests for the shared provider contract and system-message handling."""

import pytest

from parley.llm.anthropic_provider import AnthropicProvider
from parley.llm.openai_provider import OpenAIProvider
from parley.llm.providers import LLMProvider, SystemPromptMode, split_system_messages
from parley.messages import Message


class TestSplitSystemMessages:

    def test_no_system_messages(self):
        system, turns = split_system_messages([Message.user("hi"), Message.assistant("yo")])
        assert system is None
        assert [t.content for t in turns] == ["hi", "yo"]

    def test_joins_in_encounter_order(self):
        messages = [
            Message.system("first"),
            Message.user("hi"),
            Message.system("second"),
            Message.assistant("hello"),
            Message.system("third"),
        ]
        system, turns = split_system_messages(messages)
        assert system == "first\n\nsecond\n\nthird"
        assert [(t.role.value, t.content) for t in turns] == [
            ("user", "hi"),
            ("assistant", "hello"),
        ]

    def test_custom_separator(self):
        system, _ = split_system_messages(
            [Message.system("a"), Message.system("b")], separator=" | "
        )
        assert system == "a | b"

    def test_empty_system_messages_skipped(self):
        system, _ = split_system_messages(
            [Message.system(""), Message.system("rules"), Message.system("")]
        )
        assert system == "rules"

    def test_only_empty_system_messages_yield_none(self):
        system, turns = split_system_messages([Message.system(""), Message.user("hi")])
        assert system is None
        assert len(turns) == 1

    def test_empty_sequence(self):
        assert split_system_messages([]) == (None, [])

    def test_turn_order_preserved_with_duplicates(self):
        messages = [Message.user("same"), Message.user("same"), Message.assistant("x")]
        _, turns = split_system_messages(messages)
        assert turns == messages


class TestProviderContract:

    def test_adapters_satisfy_protocol(self, llm_config):
        assert isinstance(AnthropicProvider(llm_config), LLMProvider)
        assert isinstance(OpenAIProvider(llm_config), LLMProvider)

    def test_unsupported_system_mode_rejected(self, llm_config):
        with pytest.raises(ValueError, match="inline"):
            AnthropicProvider(llm_config, system_mode=SystemPromptMode.INLINE)

    def test_default_system_modes(self, llm_config):
        assert AnthropicProvider(llm_config).system_mode is SystemPromptMode.SEPARATE
        assert OpenAIProvider(llm_config).system_mode is SystemPromptMode.INLINE

    def test_base_url_override(self, llm_config):
        provider = OpenAIProvider(llm_config, base_url="https://proxy.internal/")
        assert provider.endpoint == "https://proxy.internal/v1/chat/completions"

    @pytest.mark.asyncio
    async def test_close_leaves_shared_client_open(self, llm_config, backend_factory):
        backend = backend_factory(lambda request: None)
        client = backend.client()
        provider = OpenAIProvider(llm_config, client)
        await provider.close()
        assert not client._http.is_closed
        await client.aclose()

    def test_timeout_with_shared_client_rejected(self, llm_config, backend_factory):
        client = backend_factory(lambda request: None).client()
        with pytest.raises(ValueError, match="timeout"):
            OpenAIProvider(llm_config, client, timeout=5.0)

    @pytest.mark.asyncio
    async def test_close_owned_client(self, llm_config):
        provider = OpenAIProvider(llm_config, timeout=2.0)
        assert provider._client.timeout == 2.0
        await provider.close()
        assert provider._client._http.is_closed
