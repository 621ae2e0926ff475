"""Parsing of LLM responses from a length-prefixed binary layout, and the transport interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from agentcore.llm.messages import ToolCallInfo

if TYPE_CHECKING:
    from agentcore.llm.request import Request


class FinishReason(enum.Enum):
    """Why the model stopped generating; values are the wire codes."""

    STOP = 0
    LENGTH = 1
    TOOL_USE = 2


@dataclass(frozen=True)
class Usage:
    """Token usage statistics."""

    prompt_tokens: int
    completion_tokens: int


@dataclass(frozen=True)
class TextContent:
    """A piece of text in the response."""

    text: bytes


@dataclass(frozen=True)
class ToolUseContent:
    """A tool call requested in the response."""

    info: ToolCallInfo


ResponseContent = Union[TextContent, ToolUseContent]


@dataclass
class Response:
    """A parsed response."""

    content: list[ResponseContent]
    finish_reason: FinishReason
    usage: Usage = field(default_factory=lambda: Usage(0, 0))


class ResponseParseError(ValueError):
    """Base error for malformed response data."""


class InvalidFormatError(ResponseParseError):
    """The data is truncated or has an unknown content type."""


class MissingFieldError(ResponseParseError):
    """A content item announced by the count is absent."""


class InvalidFinishReasonError(ResponseParseError):
    """The finish-reason byte is not a known code."""


_TEXT = 0
_TOOL_USE = 1


class _Reader:
    def __init__(self, data: bytes, offset: int) -> None:
        self.data = data
        self.offset = offset

    def u32(self) -> int:
        end = self.offset + 4
        if end > len(self.data):
            raise InvalidFormatError(f"truncated u32 at offset {self.offset}")
        value = int.from_bytes(self.data[self.offset:end], "big")
        self.offset = end
        return value

    def blob(self) -> bytes:
        length = self.u32()
        end = self.offset + length
        if end > len(self.data):
            raise InvalidFormatError(f"truncated field of length {length} at offset {self.offset}")
        value = self.data[self.offset:end]
        self.offset = end
        return value

    def tag(self) -> int:
        if self.offset >= len(self.data):
            raise MissingFieldError(f"missing content item at offset {self.offset}")
        value = self.data[self.offset]
        self.offset += 1
        return value


def parse_response(data: bytes) -> Response:
    """Parse a response from its binary layout.

    Layout: finish_reason u8, prompt_tokens u32 BE, completion_tokens u32 BE,
    content_count u32 BE, then per item a type byte (0 text, 1 tool use)
    followed by length-prefixed fields (text; or id, function_name, arguments).
    """
    data = bytes(data)
    if not data:
        raise InvalidFormatError("empty response data")
    try:
        finish_reason = FinishReason(data[0])
    except ValueError:
        raise InvalidFinishReasonError(f"unknown finish reason {data[0]}") from None

    reader = _Reader(data, 1)
    prompt_tokens = reader.u32()
    completion_tokens = reader.u32()
    count = reader.u32()

    content: list[ResponseContent] = []
    for _ in range(count):
        kind = reader.tag()
        if kind == _TEXT:
            content.append(TextContent(reader.blob()))
        elif kind == _TOOL_USE:
            call_id = reader.blob()
            function_name = reader.blob()
            arguments = reader.blob()
            content.append(ToolUseContent(ToolCallInfo(call_id, function_name, arguments)))
        else:
            raise InvalidFormatError(f"unknown content type {kind}")

    return Response(
        content=content,
        finish_reason=finish_reason,
        usage=Usage(prompt_tokens, completion_tokens),
    )


class TransportError(Exception):
    """Base error for transport failures."""


class ConnectionFailedError(TransportError):
    """The connection to the endpoint failed."""


class TransportTimeoutError(TransportError):
    """The request timed out."""


class InvalidResponseError(TransportError):
    """The endpoint returned an unusable response."""


class LlmTransport(abc.ABC):
    """Something that sends requests and returns parsed responses."""

    @abc.abstractmethod
    def send_request(self, req: Request) -> Response:
        """Send a request and return its response, raising TransportError on failure."""