"""Daily money advice.

Totals for one day are sent to an OpenRouter chat model which answers with a
short summary plus "do" and "avoid" lists. The model is optional: without an
API key, on HTTP failure, or when the reply is not usable JSON, a
deterministic fallback built from the same totals is returned instead.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

import httpx

from clarity.analytics.ledger import format_amount, to_entries
from clarity.analytics.totals import Totals, summarize
from clarity.config import settings

logger = logging.getLogger(__name__)

MAX_LIST_ITEMS = 4

SYSTEM_PROMPT = (
    "You are a practical personal finance coach. Return ONLY valid JSON with keys: "
    "briefSummary (string), doList (array of max 4 strings), avoidList (array of max 4 strings). "
    "Keep advice specific to the given day."
)

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)


@dataclass(frozen=True)
class DailyAdvice:
    date: str
    income: Decimal
    expense: Decimal
    balance: Decimal
    brief_summary: str
    do_list: list[str] = field(default_factory=list)
    avoid_list: list[str] = field(default_factory=list)
    source: str = "fallback"


def parse_advice_json(content: str) -> dict | None:
    """Parse a model reply, accepting JSON wrapped in a ```json fence."""
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        match = _FENCED_JSON.search(content)
        if not match:
            return None
        try:
            parsed = json.loads(match.group(1))
        except json.JSONDecodeError:
            return None
    return parsed if isinstance(parsed, dict) else None


def to_string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    items = [item.strip() for item in value if isinstance(item, str)]
    return [item for item in items if item][:MAX_LIST_ITEMS]


def fallback_advice(day: str, totals: Totals) -> DailyAdvice:
    """Rule-based advice used whenever the model is unavailable."""
    top = totals.top_categories(1)
    top_text = f"{top[0][0]} ({format_amount(top[0][1])})" if top else "no dominant category"
    positive = totals.balance >= 0

    if positive:
        brief = (
            f"On {day}, you stayed positive. Income was {format_amount(totals.total_income)} "
            f"and expenses were {format_amount(totals.total_expense)}."
        )
    else:
        brief = f"On {day}, spending was higher than income by {format_amount(-totals.balance)}."

    return DailyAdvice(
        date=day,
        income=totals.total_income,
        expense=totals.total_expense,
        balance=totals.balance,
        brief_summary=brief,
        do_list=[
            "Keep tracking daily so patterns stay visible.",
            f"Review {top_text} and set a small daily cap for tomorrow.",
            "Move some surplus into savings." if positive else "Trim one non-essential spend tomorrow.",
        ],
        avoid_list=[
            "Avoid impulse purchases late in the day.",
            "Do not ignore recurring small expenses.",
            "Avoid overconfidence spending."
            if positive
            else "Avoid new discretionary spending until balance improves.",
        ],
        source="fallback",
    )


class AdviceClient:
    """Minimal OpenRouter chat-completions client."""

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.model = model or settings.openrouter_model
        self.url = url or settings.openrouter_url
        self.timeout = timeout or settings.advice_timeout_seconds
        self._http_client = http_client

    @classmethod
    def from_settings(cls) -> "AdviceClient | None":
        if not settings.openrouter_api_key:
            return None
        return cls(api_key=settings.openrouter_api_key)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if settings.openrouter_site_url:
            headers["HTTP-Referer"] = settings.openrouter_site_url
        if settings.openrouter_app_name:
            headers["X-Title"] = settings.openrouter_app_name
        return headers

    async def complete(self, prompt_payload: dict) -> str | None:
        """Send the day's data and return the reply text (None on any failure)."""
        body = {
            "model": self.model,
            "temperature": 0.4,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": json.dumps(prompt_payload, default=str)},
            ],
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.url, json=body, headers=self._headers())
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json=body, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.warning("Advice request failed", extra={"error_type": type(exc).__name__})
            return None

        if response.status_code >= 400:
            logger.warning("Advice request rejected", extra={"status_code": response.status_code})
            return None

        try:
            data = response.json()
            return data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            logger.warning("Advice response had an unexpected shape")
            return None


async def daily_advice(
    day: date,
    transactions: Iterable,
    client: AdviceClient | None = None,
) -> DailyAdvice:
    """Build advice for ``day`` from that day's transactions."""
    entries = [e for e in to_entries(transactions) if e.txn_date == day]
    totals = summarize(entries)
    day_str = day.isoformat()

    if client is None:
        return fallback_advice(day_str, totals)

    content = await client.complete(
        {
            "date": day_str,
            "totals": {
                "income": totals.total_income,
                "expense": totals.total_expense,
                "balance": totals.balance,
            },
            "topExpenseCategories": [
                {"category": category, "amount": amount}
                for category, amount in totals.top_categories(3)
            ],
            "transactions": [
                {
                    "type": e.type,
                    "category": e.category,
                    "amount": e.amount,
                    "description": e.description,
                }
                for e in entries
            ],
        }
    )
    parsed = parse_advice_json(content) if content else None
    if parsed is None:
        return fallback_advice(day_str, totals)

    brief = parsed.get("briefSummary")
    if not isinstance(brief, str) or not brief.strip():
        brief = (
            f"Income {format_amount(totals.total_income)}, "
            f"expense {format_amount(totals.total_expense)} on {day_str}."
        )

    return DailyAdvice(
        date=day_str,
        income=totals.total_income,
        expense=totals.total_expense,
        balance=totals.balance,
        brief_summary=brief.strip(),
        do_list=to_string_list(parsed.get("doList")),
        avoid_list=to_string_list(parsed.get("avoidList")),
        source="ai",
    )
