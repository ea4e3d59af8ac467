import logging
import os
from typing import Any, List

import httpx
import streamlit as st

from cyclist_scatter.bootstrap_env import ensure_env
from cyclist_scatter.config import DATA_URL, DEFAULT_FETCH_TIMEOUT_SECONDS
from cyclist_scatter.errors import DatasetError, FetchError

logger = logging.getLogger(__name__)


def _get_timeout() -> float:
    """Read FETCH_TIMEOUT_SECONDS from env, falling back to the default."""
    raw = os.getenv("FETCH_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_FETCH_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid FETCH_TIMEOUT_SECONDS=%r", raw)
        return DEFAULT_FETCH_TIMEOUT_SECONDS
    return timeout if timeout > 0 else DEFAULT_FETCH_TIMEOUT_SECONDS


def fetch_raw_records(url: str, timeout: float) -> List[Any]:
    """GET the dataset and return the decoded JSON array."""
    logger.info("Fetching dataset from %s", url)
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(f"Dataset request failed with HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Dataset request failed: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise FetchError("Dataset response is not valid JSON") from exc

    if not isinstance(payload, list):
        raise DatasetError(f"Dataset must be a JSON array, got {type(payload).__name__}")
    logger.info("Fetched %d raw records", len(payload))
    return payload


def load_raw_records() -> List[Any]:
    """Wrapper that resolves config and calls the cached implementation."""
    ensure_env()
    return _load_raw_records_impl(DATA_URL, _get_timeout())


@st.cache_data(show_spinner=False, ttl=600)
def _load_raw_records_impl(url: str, timeout: float) -> List[Any]:
    """Cached by url and timeout."""
    return fetch_raw_records(url, timeout)


def clear_cache() -> None:
    _load_raw_records_impl.clear()  # type: ignore[attr-defined]
