"""GrokProvider — xAI Responses API with the web_search tool."""

import re

from pydantic import BaseModel, Field, ValidationError

from search_compare.provider.domain.citation import Citation, add_if_new
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.domain.usage import TokenUsage
from search_compare.provider.infrastructure.errors import ProviderQueryError
from search_compare.provider.infrastructure.http import JsonObject
from search_compare.provider.infrastructure.rest import RestProvider

_ENDPOINT = "https://api.x.ai/v1/responses"

# Inline footnote links: [[1]](https://example.com/page)
_FOOTNOTE_LINK = re.compile(r"\[\[(\d+)\]\]\((https?://[^\)]+)\)")


class _OutputContent(BaseModel):
    type: str = ""
    text: str = ""


class _Source(BaseModel):
    url: str = ""
    title: str = ""


class _Action(BaseModel):
    type: str = ""
    sources: list[_Source] = Field(default_factory=list)


class _OutputItem(BaseModel):
    type: str = ""
    content: list[_OutputContent] = Field(default_factory=list)
    action: _Action | None = None


class _Usage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class _Response(BaseModel):
    output_text: str = ""
    output: list[_OutputItem] = Field(default_factory=list)
    usage: _Usage | None = None


class GrokProvider(RestProvider):
    name = "grok"
    display_name = "Grok 4 (xAI)"
    emoji = "⚫"
    default_model = "grok-4"
    api_key_env_vars = ("XAI_API_KEY",)
    request_detail = "sending request with web search"

    def endpoint(self) -> str:
        return _ENDPOINT

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, text: str) -> JsonObject:
        return {
            "model": self.model,
            "input": [{"role": "user", "content": text}],
            "tools": [{"type": "web_search"}],
        }

    def parse_response(self, body: JsonObject) -> ProviderResult:
        return parse_grok_response(body=body)


def parse_grok_response(body: JsonObject) -> ProviderResult:
    """Extract answer text plus citations from inline links and search sources.

    Raises:
        ProviderQueryError: if the body is not a Responses API response.
    """
    try:
        response = _Response.model_validate(body)
    except ValidationError as exc:
        raise ProviderQueryError(provider="grok", reason=f"parse error: {exc}") from exc

    text = response.output_text or _first_output_text(response.output)

    citations: list[Citation] = []
    seen: set[str] = set()

    for match in _FOOTNOTE_LINK.finditer(text):
        add_if_new(citations, seen, Citation(url=match.group(2)))

    for item in response.output:
        if item.type != "web_search_call" or item.action is None:
            continue
        if item.action.type != "search":
            continue
        for source in item.action.sources:
            add_if_new(citations, seen, Citation(url=source.url, title=source.title))

    usage = TokenUsage()
    if response.usage is not None:
        usage = TokenUsage(
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )

    return ProviderResult(text=text, citations=citations, usage=usage)


def _first_output_text(output: list[_OutputItem]) -> str:
    for item in output:
        for content in item.content:
            if content.type == "output_text" and content.text:
                return content.text
    return ""
