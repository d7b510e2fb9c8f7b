"""NovaProvider — Amazon Nova Premier on AWS Bedrock with the nova_grounding system tool."""

import asyncio
import time
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from search_compare.config.domain.provider import ProviderConfig
from search_compare.provider.domain.citation import Citation, add_if_new
from search_compare.provider.domain.observer import ProviderObserver
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.domain.usage import TokenUsage
from search_compare.provider.infrastructure.errors import (
    ProviderAuthError,
    ProviderQueryError,
)

REGION = "us-east-1"
GROUNDING_TOOL = "nova_grounding"


class _Wire(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _WebLocation(_Wire):
    url: str = ""
    domain: str = ""


class _CitationLocation(_Wire):
    web: _WebLocation | None = None


class _SourceCitation(_Wire):
    location: _CitationLocation | None = None


class _GeneratedText(_Wire):
    text: str = ""


class _CitationsContent(_Wire):
    content: list[_GeneratedText] = Field(default_factory=list)
    citations: list[_SourceCitation] = Field(default_factory=list)


class _ContentBlock(_Wire):
    text: str | None = None
    citations_content: _CitationsContent | None = None


class _Message(_Wire):
    content: list[_ContentBlock] = Field(default_factory=list)


class _Output(_Wire):
    message: _Message | None = None


class _Usage(_Wire):
    input_tokens: int = 0
    output_tokens: int = 0


class _ConverseResponse(_Wire):
    output: _Output
    usage: _Usage | None = None


class NovaProvider:
    """Queries Nova through the Bedrock Converse API.

    Credentials come from the standard AWS chain (environment, shared
    credentials file, instance role). The blocking boto3 call runs in a
    worker thread so it shares the event loop with the REST adapters.
    """

    name = "nova"
    display_name = "Nova Premier (AWS)"
    emoji = "🟠"
    default_model = "us.amazon.nova-premier-v1:0"

    def __init__(
        self,
        config: ProviderConfig,
        observer: ProviderObserver,
        session: boto3.Session | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._session = session or boto3.Session(region_name=REGION)

    @property
    def model(self) -> str:
        return self._config.model or self.default_model

    def check_auth(self) -> None:
        """Raise ProviderAuthError unless the AWS chain yields an access key."""
        credentials = self._session.get_credentials()
        if credentials is None or not credentials.access_key:
            raise ProviderAuthError(provider=self.name, reason="AWS credentials not found")

    async def query(self, text: str, verbose: bool = False) -> ProviderResult:
        if verbose:
            self._observer.provider_request_sent(
                provider=self.name,
                model=self.model,
                detail="sending request with web grounding",
            )

        start = time.monotonic()
        try:
            body = await asyncio.to_thread(self._converse, text)
            parsed = parse_nova_response(body=body)
        except ProviderQueryError as exc:
            duration_ms = _elapsed_ms(start)
            self._observer.provider_request_failed(provider=self.name, reason=exc.reason)
            return ProviderResult.failed(error=exc.reason, duration_ms=duration_ms)

        duration_ms = _elapsed_ms(start)
        self._observer.provider_response_parsed(
            provider=self.name,
            duration_ms=duration_ms,
            num_citations=len(parsed.citations),
        )
        return parsed.model_copy(update={"duration_ms": duration_ms})

    def _converse(self, text: str) -> dict[str, Any]:
        try:
            client = self._session.client(
                "bedrock-runtime",
                region_name=REGION,
                config=Config(
                    read_timeout=self._config.timeout_seconds,
                    retries={"total_max_attempts": 1, "mode": "standard"},
                ),
            )
            return client.converse(
                modelId=self.model,
                messages=[{"role": "user", "content": [{"text": text}]}],
                toolConfig={"tools": [{"systemTool": {"name": GROUNDING_TOOL}}]},
            )
        except (BotoCoreError, ClientError) as exc:
            raise ProviderQueryError(provider=self.name, reason=f"API error: {exc}") from exc


def parse_nova_response(body: dict[str, Any]) -> ProviderResult:
    """Concatenate plain and cited text, collecting web citations with their domains.

    Raises:
        ProviderQueryError: if the body carries no output message.
    """
    try:
        response = _ConverseResponse.model_validate(body)
    except ValidationError as exc:
        raise ProviderQueryError(provider="nova", reason=f"parse error: {exc}") from exc
    if response.output.message is None:
        raise ProviderQueryError(provider="nova", reason="unexpected output type")

    parts: list[str] = []
    citations: list[Citation] = []
    seen: set[str] = set()

    for block in response.output.message.content:
        if block.text is not None:
            parts.append(block.text)
        if block.citations_content is None:
            continue
        parts.extend(generated.text for generated in block.citations_content.content)
        for source in block.citations_content.citations:
            web = source.location.web if source.location is not None else None
            if web is None:
                continue
            add_if_new(citations, seen, Citation(url=web.url, domain=web.domain))

    usage = response.usage or _Usage()
    return ProviderResult(
        text="".join(parts),
        citations=citations,
        usage=TokenUsage(
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        ),
    )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
