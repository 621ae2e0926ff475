from agentcore.llm.messages import (
    Role,
    RoleMessage,
    ToolCall,
    ToolCallInfo,
    ToolResult,
    ToolResultInfo,
)
from agentcore.llm.tokens import (
    BYTES_PER_TOKEN,
    MESSAGE_OVERHEAD,
    estimate_tokens,
    estimate_tokens_single,
)


def test_sys_message_is_four_tokens():
    assert estimate_tokens_single(RoleMessage(Role.SYSTEM, b"sys")) == 4


def test_empty_content_is_overhead_only():
    assert estimate_tokens_single(RoleMessage(Role.USER, b"")) == MESSAGE_OVERHEAD


def test_each_full_token_of_bytes_adds_one():
    short = RoleMessage(Role.USER, b"a" * BYTES_PER_TOKEN)
    longer = RoleMessage(Role.USER, b"a" * (BYTES_PER_TOKEN * 2))
    assert estimate_tokens_single(longer) == estimate_tokens_single(short) + 1


def test_partial_token_rounds_down():
    exact = RoleMessage(Role.USER, b"a" * BYTES_PER_TOKEN)
    extra = RoleMessage(Role.USER, b"a" * (BYTES_PER_TOKEN * 2 - 1))
    assert estimate_tokens_single(extra) == estimate_tokens_single(exact)


def test_tool_messages_use_their_payload():
    call = ToolCall(ToolCallInfo(id=b"1", function_name=b"search", arguments=b"cats"))
    result = ToolResult(ToolResultInfo(tool_call_id=b"1", content=b"cats"))
    plain = RoleMessage(Role.USER, b"cats")
    assert estimate_tokens_single(call) == estimate_tokens_single(plain)
    assert estimate_tokens_single(result) == estimate_tokens_single(plain)


def test_empty_list_has_no_tokens():
    assert estimate_tokens([]) == 0


def test_total_is_sum_of_parts():
    msgs = [RoleMessage(Role.SYSTEM, b"sys"), RoleMessage(Role.USER, b"hello there")]
    assert estimate_tokens(msgs) == sum(estimate_tokens_single(m) for m in msgs)
    assert estimate_tokens(iter(msgs)) == estimate_tokens(msgs)