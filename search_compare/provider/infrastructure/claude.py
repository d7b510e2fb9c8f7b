"""ClaudeProvider — Anthropic Messages API with the server-side web_search tool."""

from pydantic import BaseModel, Field, ValidationError

from search_compare.provider.domain.citation import Citation, add_if_new
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.domain.usage import TokenUsage
from search_compare.provider.infrastructure.errors import ProviderQueryError
from search_compare.provider.infrastructure.http import JsonObject
from search_compare.provider.infrastructure.rest import RestProvider

_ENDPOINT = "https://api.anthropic.com/v1/messages"
_API_VERSION = "2023-06-01"
_WEB_SEARCH_CITATION = "web_search_result_location"


class _TextCitation(BaseModel):
    type: str
    url: str = ""
    title: str | None = None


class _ContentBlock(BaseModel):
    type: str
    text: str = ""
    citations: list[_TextCitation] | None = None


class _Usage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class _Message(BaseModel):
    content: list[_ContentBlock] = Field(default_factory=list)
    usage: _Usage = Field(default_factory=_Usage)


class ClaudeProvider(RestProvider):
    name = "claude"
    display_name = "Claude 4.5 Sonnet"
    emoji = "🟣"
    default_model = "claude-sonnet-4-5-20250929"
    api_key_env_vars = ("ANTHROPIC_API_KEY",)
    request_detail = "sending request with web_search tool"

    def endpoint(self) -> str:
        return _ENDPOINT

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": _API_VERSION,
            "content-type": "application/json",
        }

    def build_payload(self, text: str) -> JsonObject:
        return {
            "model": self.model,
            "max_tokens": 4096,
            "messages": [{"role": "user", "content": text}],
            "tools": [{"type": "web_search_20250305", "name": "web_search"}],
        }

    def parse_response(self, body: JsonObject) -> ProviderResult:
        return parse_claude_response(body=body)


def parse_claude_response(body: JsonObject) -> ProviderResult:
    """Concatenate text blocks and collect their web-search citations.

    Raises:
        ProviderQueryError: if the body is not a Messages API response.
    """
    try:
        message = _Message.model_validate(body)
    except ValidationError as exc:
        raise ProviderQueryError(provider="claude", reason=f"parse error: {exc}") from exc

    parts: list[str] = []
    citations: list[Citation] = []
    seen: set[str] = set()

    for block in message.content:
        if block.type != "text":
            continue
        parts.append(block.text)
        for citation in block.citations or []:
            if citation.type != _WEB_SEARCH_CITATION:
                continue
            add_if_new(
                citations,
                seen,
                Citation(url=citation.url, title=citation.title or ""),
            )

    return ProviderResult(
        text="".join(parts),
        citations=citations,
        usage=TokenUsage(
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        ),
    )
