"""AI advice HTTP client for an OpenAI-compatible chat completions API"""

import asyncio
import json
import re
from typing import Any, Dict, List, Sequence
import httpx
from decision_assistant.config import settings
from decision_assistant.domain.exceptions import AdviceServiceError
from decision_assistant.domain.financial import (
    consortium_monthly_payment,
    consortium_total,
    financing_monthly_payment,
    financing_total,
)
from decision_assistant.domain.models import (
    AdviceOption,
    ConsortiumTerms,
    Criterion,
    CriterionSuggestion,
    FinancingTerms,
    ScoredOption,
    WeightedResult,
)
from decision_assistant.infrastructure.clients import prompts
from decision_assistant.infrastructure.observability.metrics import advice_latency_histogram, advice_failure_counter
from decision_assistant.utils.number_utils import format_currency

# Rate limiting and server-side failures are worth another attempt
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


def clean_triple_backticks(text: str) -> str:
    """Strip a Markdown code fence wrapped around a model reply"""
    return _FENCE_RE.sub("", text.strip())


def parse_suggestions(raw: str) -> List[CriterionSuggestion]:
    """
    Parse the JSON criteria suggestions returned by the model.

    Accepts either {"suggestions": [...]} or a bare list.

    Raises:
        AdviceServiceError: reply is not valid JSON or misses required fields
    """
    try:
        data = json.loads(clean_triple_backticks(raw))
        items = data["suggestions"] if isinstance(data, dict) else data
        return [
            CriterionSuggestion(
                name=str(item["name"]).strip(),
                weight=int(round(float(item["weight"]))),
                rationale=str(item.get("rationale", "")),
            )
            for item in items
        ]
    except (KeyError, ValueError, TypeError, OverflowError) as e:
        raise AdviceServiceError(f"Invalid suggestions from advice service: {e}") from e


class AdviceClient:
    """Client for the external AI advice service"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.advice_api_base).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.advice_api_key
        self.model = model or settings.advice_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = settings.advice_max_retries if max_retries is None else max_retries
        self.backoff_base = settings.advice_backoff_base if backoff_base is None else backoff_base
        self.transport = transport

    async def complete(self, prompt: str) -> str:
        """
        Send a single prompt and return the model's text reply.

        Retry strategy:
        - Exponential backoff: base * 2^(attempt-1)
        - Retries on 429/5xx responses and network failures
        - Other 4xx responses fail immediately

        Raises:
            AdviceServiceError: On exhausted retries, HTTP errors, or malformed reply
        """
        payload = {
            "model": self.model,
            "temperature": settings.advice_temperature,
            "messages": [
                {"role": "system", "content": prompts.SYSTEM_PROMPT.strip()},
                {"role": "user", "content": prompt.strip()},
            ],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with advice_latency_histogram.time():
                        response = await client.post(
                            f"{self.base_url}/chat/completions",
                            json=payload,
                            headers=headers,
                        )
                        response.raise_for_status()
                    return self._extract_content(response.json())

                except httpx.HTTPStatusError as e:
                    attempt += 1
                    advice_failure_counter.inc()
                    status = e.response.status_code
                    if status not in RETRYABLE_STATUS_CODES or attempt >= self.max_retries:
                        raise AdviceServiceError(f"Advice API error: {status}") from e

                except httpx.TimeoutException as e:
                    attempt += 1
                    advice_failure_counter.inc()
                    if attempt >= self.max_retries:
                        raise AdviceServiceError(f"Advice API timeout after {self.timeout}s") from e

                except httpx.RequestError as e:
                    attempt += 1
                    advice_failure_counter.inc()
                    if attempt >= self.max_retries:
                        raise AdviceServiceError(f"Advice API unreachable: {e}") from e

                backoff = self.backoff_base * (2 ** (attempt - 1))
                await asyncio.sleep(backoff)

    @staticmethod
    def _extract_content(data: Dict[str, Any]) -> str:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise AdviceServiceError(f"Malformed reply from advice service: {e}") from e
        if not content or not str(content).strip():
            raise AdviceServiceError("Empty reply from advice service")
        return str(content).strip()

    async def yes_no_advice(self, context: str) -> str:
        return await self.complete(prompts.YES_NO_PROMPT.format(context=context))

    async def multiple_choice_advice(self, context: str, options: Sequence[AdviceOption]) -> str:
        lines = "\n".join(f"- **{o.value}**: {o.description}" for o in options)
        return await self.complete(prompts.MULTIPLE_CHOICE_PROMPT.format(context=context, options=lines))

    async def financial_spending_advice(
        self,
        context: str,
        financing: FinancingTerms,
        consortium: ConsortiumTerms,
    ) -> str:
        """Advice on financing vs consortium; computed totals go into the prompt as context"""
        prompt = prompts.FINANCIAL_SPENDING_PROMPT.format(
            context=context,
            financing_value=format_currency(financing.total_value),
            down_payment=format_currency(financing.down_payment),
            interest_rate=financing.interest_rate_monthly_percent,
            financing_installments=financing.installment_count,
            financing_monthly=format_currency(financing_monthly_payment(financing)),
            financing_total=format_currency(financing_total(financing)),
            consortium_value=format_currency(consortium.total_value),
            admin_fee=consortium.admin_fee_percent,
            consortium_installments=consortium.installment_count,
            consortium_monthly=format_currency(consortium_monthly_payment(consortium)),
            consortium_total=format_currency(consortium_total(consortium)),
        )
        return await self.complete(prompt)

    async def financial_analysis_advice(self, context: str, fixed_cost: float, variable_cost: float) -> str:
        prompt = prompts.FINANCIAL_ANALYSIS_PROMPT.format(
            context=context,
            fixed_cost=format_currency(fixed_cost),
            variable_cost=format_currency(variable_cost),
        )
        return await self.complete(prompt)

    async def weighted_suggestions(self, context: str) -> List[CriterionSuggestion]:
        raw = await self.complete(prompts.WEIGHTED_SUGGESTIONS_PROMPT.format(context=context))
        return parse_suggestions(raw)

    async def financial_weight_suggestions(self, context: str) -> List[CriterionSuggestion]:
        raw = await self.complete(prompts.FINANCIAL_WEIGHTS_PROMPT.format(context=context))
        return parse_suggestions(raw)

    async def weighted_advice(
        self,
        context: str,
        criteria: Sequence[Criterion],
        options: Sequence[ScoredOption],
        results: Sequence[WeightedResult],
    ) -> str:
        """Narrate a recommendation from already computed weighted scores"""
        criteria_lines = "\n".join(f"- {c.name}: {c.weight}%" for c in criteria)
        option_lines = "\n".join(
            f"- **{o.name}**: " + ", ".join(f"{c.name}={o.scores.get(c.name, 0)}" for c in criteria)
            for o in options
        )
        result_lines = "\n".join(f"- **{r.name}**: {r.final_score:.2f}" for r in results)
        prompt = prompts.WEIGHTED_ADVICE_PROMPT.format(
            context=context,
            criteria=criteria_lines,
            options=option_lines,
            results=result_lines,
        )
        return await self.complete(prompt)
