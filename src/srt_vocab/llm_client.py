"""LLM API client utilities."""

from __future__ import annotations

import logging
from typing import List, Dict
from enum import Enum

from openai import (
    OpenAI,
    APIConnectionError,
    RateLimitError,
    AuthenticationError,
    BadRequestError,
    APIStatusError,
)

from .errors import TranslationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"


class APIErrorType(Enum):
    """API 错误类型分类。"""
    RATE_LIMIT = "rate_limit"      # 429
    CONNECTION = "connection"       # 网络问题
    AUTH = "auth"                   # 401
    BAD_REQUEST = "bad_request"     # 400
    SERVER = "server"               # 500+
    EMPTY = "empty"                 # 空响应
    UNKNOWN = "unknown"


def classify_error(error: Exception) -> APIErrorType:
    """分类 API 错误。"""
    if isinstance(error, RateLimitError):
        return APIErrorType.RATE_LIMIT
    elif isinstance(error, APIConnectionError):
        return APIErrorType.CONNECTION
    elif isinstance(error, AuthenticationError):
        return APIErrorType.AUTH
    elif isinstance(error, BadRequestError):
        return APIErrorType.BAD_REQUEST
    elif isinstance(error, APIStatusError):
        if getattr(error, 'status_code', 0) >= 500:
            return APIErrorType.SERVER
        return APIErrorType.UNKNOWN
    else:
        return APIErrorType.UNKNOWN


def call_llm(
    client: OpenAI,
    model: str,
    messages: List[Dict[str, str]],
    temperature: float = 0.3,
) -> str:
    """
    Make a single blocking call to the LLM API.

    There is no retry: any failure is raised as TranslationError.

    Args:
        client: OpenAI client instance
        model: Model name to use
        messages: List of message dictionaries
        temperature: Sampling temperature

    Returns:
        Response content as string
    """
    try:
        response = client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
    except Exception as e:
        error_type = classify_error(e)
        logger.error(f"LLM request failed ({error_type.value}): {e}")
        raise TranslationError(str(e), error_type) from e

    content = response.choices[0].message.content
    if not content or not content.strip():
        raise TranslationError("empty response", APIErrorType.EMPTY)
    return content.strip()


def create_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 60.0
) -> OpenAI:
    """
    Create an OpenAI client.

    The client's own retries are disabled so that every request is sent
    exactly once.

    Args:
        api_key: API key for authentication
        base_url: API base URL
        timeout: Default timeout for requests

    Returns:
        Configured OpenAI client
    """
    return OpenAI(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        max_retries=0,
    )
