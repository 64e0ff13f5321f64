"""Tests for the uniform message model."""

import dataclasses

import pytest

from parley.messages import Message, Role


class TestRole:

    def test_role_values(self):
        assert Role.SYSTEM.value == "system"
        assert Role.USER.value == "user"
        assert Role.ASSISTANT.value == "assistant"

    def test_roles_are_closed_set(self):
        assert {r.value for r in Role} == {"system", "user", "assistant"}


class TestMessage:

    def test_constructors(self):
        assert Message.system("be concise") == Message(Role.SYSTEM, "be concise")
        assert Message.user("hi").role == Role.USER
        assert Message.assistant("hello").role == Role.ASSISTANT

    def test_empty_content_is_legal(self):
        msg = Message.user("")
        assert msg.content == ""

    def test_none_content_rejected(self):
        with pytest.raises(ValueError):
            Message.user(None)

    def test_non_str_content_rejected(self):
        with pytest.raises(TypeError):
            Message(role=Role.USER, content=42)

    def test_role_must_be_enum(self):
        with pytest.raises(TypeError):
            Message(role="user", content="hi")

    def test_message_is_immutable(self):
        msg = Message.user("hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.content = "changed"

    def test_messages_hashable(self):
        assert len({Message.user("a"), Message.user("a"), Message.assistant("a")}) == 2
