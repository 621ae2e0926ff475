import pytest

from agentcore.llm.conversation import (
    Conversation,
    ConversationError,
    InvalidAlternationError,
    NotSystemFirstError,
)
from agentcore.llm.messages import (
    Role,
    RoleMessage,
    ToolCall,
    ToolCallInfo,
    ToolResult,
    ToolResultInfo,
)


def user_msg(s):
    return RoleMessage(Role.USER, s.encode())


def assistant_msg(s):
    return RoleMessage(Role.ASSISTANT, s.encode())


def _tool_call():
    return ToolCall(ToolCallInfo(id=b"1", function_name=b"search", arguments=b"cats"))


def test_new_conversation():
    conv = Conversation(b"You are helpful.", 1000)
    assert len(conv.messages) == 1
    assert conv.messages[0] == RoleMessage(Role.SYSTEM, b"You are helpful.")


def test_append_valid_alternation():
    conv = Conversation(b"sys", 10000)
    conv.append(user_msg("hello"))
    conv.append(assistant_msg("hi"))
    conv.append(user_msg("how are you?"))
    assert len(conv.messages) == 4


def test_append_invalid_user_after_user():
    conv = Conversation(b"sys", 10000)
    conv.append(user_msg("hello"))
    with pytest.raises(InvalidAlternationError):
        conv.append(user_msg("hello again"))
    assert len(conv.messages) == 2


def test_append_invalid_assistant_first():
    conv = Conversation(b"sys", 10000)
    with pytest.raises(InvalidAlternationError):
        conv.append(assistant_msg("hi"))


def test_append_system_after_system_rejected():
    conv = Conversation(b"sys", 10000)
    with pytest.raises(ConversationError):
        conv.append(RoleMessage(Role.SYSTEM, b"again"))


def test_append_tool_call_after_user():
    conv = Conversation(b"sys", 10000)
    conv.append(user_msg("search for cats"))
    conv.append(_tool_call())
    assert conv.messages[-1] == _tool_call()


def test_append_tool_result_after_tool_call():
    conv = Conversation(b"sys", 10000)
    conv.append(user_msg("search for cats"))
    conv.append(_tool_call())
    result = ToolResult(ToolResultInfo(tool_call_id=b"1", content=b"Found 42 cats"))
    conv.append(result)
    assert len(conv.messages) == 4


def test_empty_conversation_requires_system_first():
    conv = Conversation(b"sys", 10000)
    conv.messages.clear()
    with pytest.raises(NotSystemFirstError):
        conv.append(user_msg("hello"))
    conv.append(RoleMessage(Role.SYSTEM, b"fresh"))
    assert conv.messages == [RoleMessage(Role.SYSTEM, b"fresh")]


def test_trim_to_context():
    conv = Conversation(b"sys", 20)
    conv.append(user_msg("a]long message that has many bytes in it"))
    conv.append(assistant_msg("another long response with lots of text"))
    conv.append(user_msg("yet another message"))
    conv.append(assistant_msg("and the final response"))
    before = len(conv.messages)
    conv.trim_to_context()
    assert len(conv.messages) <= before
    assert conv.total_estimated_tokens() <= conv.max_context_tokens or len(conv.messages) <= 2


def test_trim_removes_oldest_first():
    conv = Conversation(b"sys", 20)
    conv.append(user_msg("a]long message that has many bytes in it"))
    conv.append(assistant_msg("another long response with lots of text"))
    conv.append(user_msg("yet another message"))
    conv.append(assistant_msg("and the final response"))
    last = conv.messages[-1]
    conv.trim_to_context()
    assert conv.messages[-1] == last
    assert conv.messages[0] == RoleMessage(Role.SYSTEM, b"sys")


def test_trim_preserves_system():
    conv = Conversation(b"system prompt", 5)
    conv.append(user_msg("hello"))
    conv.append(assistant_msg("world"))
    conv.trim_to_context()
    assert len(conv.messages) >= 1
    assert conv.messages[0] == RoleMessage(Role.SYSTEM, b"system prompt")


def test_total_estimated_tokens():
    conv = Conversation(b"sys", 10000)
    assert conv.total_estimated_tokens() == 4