"""AI classifier capability: abstract interface, OpenAI implementation, canned stub."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx
from openai import AsyncOpenAI

from resume_signal_ai.config import (
    AI_ENABLED,
    AI_MAX_RETRIES,
    OPENAI_API_KEY,
    PROMPT_CHAR_LIMITS,
)
from resume_signal_ai.errors import ClassifierError
from resume_signal_ai.schemas.pipeline_config import PipelineConfig
from resume_signal_ai.services.prompts import TASK_PROMPTS
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

CONNECT_TIMEOUT_SECONDS = 5.0


class Classifier(ABC):
    """Untyped request/response capability used by the AI-assisted stages."""

    @abstractmethod
    async def classify(self, task: str, payload: Dict[str, Any]) -> Any:
        """
        Run one classification task. The response is untrusted: a string that may
        wrap JSON in prose, or an already-decoded dict/list.
        """
        ...


class OpenAIClassifier(Classifier):
    """Chat-completions backed classifier. One request per call; retries are the client's concern."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        api_key: str = OPENAI_API_KEY,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._config = config or PipelineConfig()
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            timeout=httpx.Timeout(self._config.ai_timeout_seconds, connect=CONNECT_TIMEOUT_SECONDS),
            max_retries=AI_MAX_RETRIES,
        )

    async def classify(self, task: str, payload: Dict[str, Any]) -> Any:
        prompt = TASK_PROMPTS.get(task)
        if prompt is None:
            raise ClassifierError(task, "unsupported task")
        text = str(payload.get("text") or "")
        limit = PROMPT_CHAR_LIMITS.get(task, 2000)
        response = await self._client.chat.completions.create(
            model=self._config.model_name,
            messages=[
                {"role": "system", "content": prompt},
                {"role": "user", "content": f"Resume text:\n\n{text[:limit].strip()}"},
            ],
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise ClassifierError(task, "empty response")
        return choice.message.content


class StaticClassifier(Classifier):
    """
    Deterministic classifier returning canned responses per task.
    A response that is an exception instance is raised instead of returned;
    a task with no entry raises ClassifierError. Calls are recorded in `calls`.
    """

    def __init__(self, responses: Optional[Mapping[str, Any]] = None, delay_seconds: float = 0.0) -> None:
        self._responses = dict(responses or {})
        self._delay_seconds = delay_seconds
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def classify(self, task: str, payload: Dict[str, Any]) -> Any:
        self.calls.append((task, dict(payload)))
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)
        if task not in self._responses:
            raise ClassifierError(task, "no canned response")
        response = self._responses[task]
        if isinstance(response, BaseException):
            raise response
        return response


async def classify_with_timeout(
    classifier: Classifier,
    task: str,
    payload: Dict[str, Any],
    timeout_seconds: float,
) -> Optional[Any]:
    """
    Single attempt at a classifier call bounded by `timeout_seconds`.
    Any failure (timeout, transport, ClassifierError) is logged and returns None
    so the caller takes its deterministic path.
    """
    try:
        return await asyncio.wait_for(classifier.classify(task, payload), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.warning("Classifier task %s timed out after %.1fs; using fallback", task, timeout_seconds)
    except ClassifierError as e:
        logger.warning("Classifier task %s failed: %s; using fallback", task, e)
    except Exception as e:
        logger.warning("Classifier task %s raised %s: %s; using fallback", task, type(e).__name__, e)
    return None


def build_default_classifier(config: Optional[PipelineConfig] = None) -> Optional[Classifier]:
    """OpenAI classifier when AI is enabled and a key is configured, else None (heuristic-only)."""
    if not AI_ENABLED:
        logger.info("AI classification disabled (RESUME_AI_ENABLED=false); running heuristic-only")
        return None
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; running heuristic-only")
        return None
    return OpenAIClassifier(config=config)
