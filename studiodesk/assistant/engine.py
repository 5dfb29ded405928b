"""AI assistant adapter: free-text chat and structured quotation drafts."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

import requests

from studiodesk.core.models import Asset, Freelancer, QuotationItem, ServiceItem
from studiodesk.core.utils import get_config_value, load_env_file

logger = logging.getLogger(__name__)
DEFAULT_SECRET_FILE = Path(__file__).resolve().parents[1] / "secrets" / "openai.env"
_AI_ENV_LOADED = False

CHAT_FALLBACK_MESSAGE = "Neural connection severed. Query lost in transit."
EMPTY_RESPONSE_MESSAGE = "I couldn't generate a response at this time."

SYSTEM_INSTRUCTION = """
You are an expert creative agency assistant for a photography and videography studio.
You help the agency owners manage their business.
Your tone is professional, encouraging, and precise.

Studio policies to follow:
1. Pricing is always in Indian Rupees (₹).
2. "Traditional Photography" starts at ₹5,200 (Crop Sensor).
3. "Classic Photography" starts at ₹6,850 (Full Sensor).
4. Video Editing (Traditional) starts strictly at ₹3,000 for up to 30 minutes.
5. Photo Editing (Common) is ₹1,000 for 100 photos.
6. Raw photos are always unlimited and file transfer is free online.
7. Print Add-ons: Printed hard-copy photo album (Up to 150 photos) is ₹4,000.
8. External device file transfers are paid.

When asked about equipment, prioritize the studio fleet: Sony SII, Sony 6000, Canon M50, Ronin RC, Godox LC500.
""".strip()

QUOTE_SYSTEM_INSTRUCTION = (
    "You are the studio's quotation optimization engine. Build quotes based on the studio rate card. "
    "Output strictly in JSON format matching the schema."
)

QUOTATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectType": {"type": "string", "description": "Photography, Videography, or Hybrid"},
        "tier": {"type": "string", "description": "Standard or Premium"},
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "description": {"type": "string"},
                    "price": {"type": "number"},
                    "quantity": {"type": "number"},
                    "type": {"type": "string", "description": "catalog, resource, or manual"},
                },
                "required": ["description", "price", "quantity", "type"],
                "additionalProperties": False,
            },
        },
        "explanation": {"type": "string", "description": "Briefly explain why this combination was selected."},
    },
    "required": ["projectType", "tier", "items", "explanation"],
    "additionalProperties": False,
}


class AIServiceError(RuntimeError):
    """Raised when the completion service cannot produce a usable answer."""


def _secret_file() -> Path:
    override = os.getenv("AI_SECRET_FILE")
    return Path(override).expanduser() if override else DEFAULT_SECRET_FILE


def _load_ai_secrets() -> None:
    """Export ``OPENAI_*`` settings from the secrets file on first client creation."""

    global _AI_ENV_LOADED
    if not _AI_ENV_LOADED:
        _AI_ENV_LOADED = True
        load_env_file(_secret_file())


class CompletionClient(Protocol):
    def complete(self, system: str, prompt: str, schema: Optional[Dict[str, Any]] = None) -> str:
        ...


class OpenAICompletionClient:
    """Single round-trip calls to an OpenAI-compatible chat completions API."""

    def __init__(self) -> None:
        _load_ai_secrets()
        self.api_key = os.getenv("OPENAI_API_KEY")
        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.quote_model = os.getenv("OPENAI_QUOTE_MODEL", self.model)
        self.base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.disabled = get_config_value("AI_ASSISTANT_DISABLED", "0") == "1"
        self.session = requests.Session() if self.api_key else None

    def complete(self, system: str, prompt: str, schema: Optional[Dict[str, Any]] = None) -> str:
        if self.disabled or not self.session:
            raise AIServiceError("AI service is disabled or missing an API key")

        payload: Dict[str, Any] = {
            "model": self.quote_model if schema else self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
        }
        if schema:
            payload["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "quotation", "schema": schema, "strict": True},
            }

        try:
            response = self.session.post(
                f"{self.base_url}/chat/completions",
                headers={"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"},
                json=payload,
                timeout=60,
            )
            response.raise_for_status()
            return response.json()["choices"][0]["message"]["content"] or ""
        except requests.RequestException as exc:
            raise AIServiceError(f"Completion request failed: {exc}") from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise AIServiceError("Completion response was malformed") from exc


def _amount(value: Any) -> float:
    """Accept only non-negative JSON numbers for prices and quantities."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    if value < 0:
        raise ValueError(f"amount must be non-negative, got {value!r}")
    return value


@dataclass
class AIQuotationDraft:
    """A quotation proposal returned by the structured completion."""

    project_type: str
    tier: str
    items: List[QuotationItem] = field(default_factory=list)
    explanation: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AIQuotationDraft":
        missing = [key for key in QUOTATION_SCHEMA["required"] if key not in payload]
        if missing:
            raise AIServiceError(f"AI quotation is missing fields: {', '.join(missing)}")
        try:
            items = [
                QuotationItem(
                    description=str(item["description"]),
                    quantity=_amount(item["quantity"]),
                    price=_amount(item["price"]),
                    type=item["type"],
                )
                for item in payload["items"]
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise AIServiceError("AI quotation contains an invalid line item") from exc
        return cls(
            project_type=payload["projectType"],
            tier=payload["tier"],
            items=items,
            explanation=payload["explanation"],
        )


class AIAssistant:
    """Forwards prompts to the completion service.

    Chat is best effort and degrades to a fixed message. Structured quoting
    raises :class:`AIServiceError` so a malformed quote never looks valid.
    """

    def __init__(self, client: Optional[CompletionClient] = None) -> None:
        self.client = client or OpenAICompletionClient()

    def chat(self, prompt: str) -> str:
        try:
            text = self.client.complete(SYSTEM_INSTRUCTION, prompt)
        except Exception:
            logger.exception("Assistant chat failed")
            return CHAT_FALLBACK_MESSAGE
        return text.strip() or EMPTY_RESPONSE_MESSAGE

    def draft_quotation(
        self,
        constraints: str,
        services: Iterable[ServiceItem],
        contractors: Iterable[Freelancer],
        assets: Iterable[Asset],
    ) -> AIQuotationDraft:
        prompt = self._quotation_prompt(constraints, services, contractors, assets)
        try:
            raw = self.client.complete(QUOTE_SYSTEM_INSTRUCTION, prompt, schema=QUOTATION_SCHEMA)
            payload = json.loads(raw or "{}")
        except AIServiceError:
            logger.error("AI quotation request failed")
            raise
        except ValueError as exc:
            logger.error("AI quotation was not valid JSON")
            raise AIServiceError("AI quotation was not valid JSON") from exc

        if not isinstance(payload, dict):
            raise AIServiceError("AI quotation must be a JSON object")
        draft = AIQuotationDraft.from_payload(payload)
        logger.info("AI drafted a %s quotation with %d items", draft.tier, len(draft.items))
        return draft

    def _quotation_prompt(
        self,
        constraints: str,
        services: Iterable[ServiceItem],
        contractors: Iterable[Freelancer],
        assets: Iterable[Asset],
    ) -> str:
        def _dump(records: Iterable[Any]) -> str:
            return json.dumps([record.to_dict() for record in records], ensure_ascii=False)

        return "\n".join(
            [
                f'User Constraints: "{constraints}"',
                "",
                "Current Studio Catalog Data:",
                f"Services: {_dump(services)}",
                f"Contractors: {_dump(contractors)}",
                f"Assets: {_dump(assets)}",
                "",
                "Task:",
                "Build a quotation for the studio. Use EXACT prices from the catalog.",
                "- Traditional packages use Crop sensors (Sony 6000, Canon M50).",
                "- Classic/Premium packages use Full sensors (Sony SII).",
                "- Always include Photo Editing (₹1,000) if photography is selected.",
                "- Baseline video editing is ₹3,000.",
            ]
        )
