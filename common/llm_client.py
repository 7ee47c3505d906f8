# SPDX-License-Identifier: AGPL-3.0-only

"""
LLM client wrapper with provider abstraction.

One call per request, no retries: the upstream API is metered, so failures
degrade to canned results instead of being retried.
"""
import logging
from typing import Any, Dict, Optional

import requests

from common.errors import UpstreamError

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai", "anthropic", "ollama")


class LLMClient:
    """Unified client for calling LLM providers (Gemini, OpenAI, Anthropic, local Ollama)."""

    def __init__(self, config, session: Optional[requests.Session] = None):
        """
        Args:
            config: AppConfig with provider, model names and credentials
            session: optional requests session (tests inject one); plain
                requests.post per call when omitted
        """
        self.config = config
        self.provider = config.provider
        self.timeout = config.ai_timeout_seconds
        self.session = session

        if self.provider not in SUPPORTED_PROVIDERS:
            logger.warning("Unknown AI_SERVICE '%s'; AI calls will be skipped", self.provider)

    @property
    def available(self) -> bool:
        """Whether a call can be attempted at all."""
        return self.provider in SUPPORTED_PROVIDERS and self.config.has_credential

    @property
    def model(self) -> str:
        return {
            "gemini": self.config.gemini_model,
            "openai": self.config.openai_model,
            "anthropic": self.config.anthropic_model,
            "ollama": self.config.ollama_model,
        }.get(self.provider, "")

    def invoke(self, prompt: str, system_prompt: str = "") -> str:
        """
        Send a prompt to the configured model and return its raw reply text.

        Raises:
            UpstreamError: reason is no-credential, network, quota or model-error
        """
        if not self.available:
            raise UpstreamError(f"No API credential configured for '{self.provider}'", reason="no-credential")

        logger.debug("Calling %s/%s with prompt of %d chars", self.provider, self.model, len(prompt))
        try:
            if self.provider == "gemini":
                return self._call_gemini(prompt, system_prompt)
            elif self.provider == "openai":
                return self._call_openai(prompt, system_prompt)
            elif self.provider == "anthropic":
                return self._call_anthropic(prompt, system_prompt)
            return self._call_ollama(prompt, system_prompt)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise UpstreamError(f"Could not reach {self.provider}: {e}", reason="network") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 429:
                raise UpstreamError(f"{self.provider} quota exceeded", reason="quota") from e
            raise UpstreamError(f"{self.provider} returned HTTP {status}", reason="model-error") from e
        except requests.exceptions.JSONDecodeError as e:
            raise UpstreamError(f"{self.provider} returned a non-JSON body", reason="model-error") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Error calling {self.provider}: {e}", reason="network") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise UpstreamError(f"Unexpected reply shape from {self.provider}: {e}", reason="model-error") from e

    def _post(self, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        post = self.session.post if self.session is not None else requests.post
        resp = post(url, json=payload, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def _call_gemini(self, prompt: str, system_prompt: str) -> str:
        """Call the Generative Language REST API."""
        url = f"{self.config.gemini_base_url.rstrip('/')}/models/{self.model}:generateContent"
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.ai_temperature,
                "maxOutputTokens": self.config.ai_max_tokens,
            },
        }
        if system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}

        data = self._post(url, payload, headers={"x-goog-api-key": self.config.gemini_api_key})
        candidate = data["candidates"][0]
        parts = candidate.get("content", {}).get("parts", [])
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise ValueError(f"empty candidate (finishReason={candidate.get('finishReason')})")
        return text

    def _call_openai(self, prompt: str, system_prompt: str) -> str:
        """Call OpenAI API."""
        headers = {
            "Authorization": f"Bearer {self.config.openai_api_key}",
            "Content-Type": "application/json"
        }

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.config.ai_max_tokens,
            "temperature": self.config.ai_temperature
        }

        data = self._post("https://api.openai.com/v1/chat/completions", payload, headers=headers)
        return data["choices"][0]["message"]["content"]

    def _call_anthropic(self, prompt: str, system_prompt: str) -> str:
        """Call Anthropic API."""
        headers = {
            "x-api-key": self.config.anthropic_api_key,
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json"
        }

        payload: Dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.config.ai_max_tokens,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.ai_temperature
        }
        if system_prompt:
            payload["system"] = system_prompt

        data = self._post("https://api.anthropic.com/v1/messages", payload, headers=headers)
        return data["content"][0]["text"]

    def _call_ollama(self, prompt: str, system_prompt: str) -> str:
        """Call local Ollama instance."""
        payload = {
            "model": self.model,
            "prompt": prompt,
            "system": system_prompt,
            "stream": False,
            "options": {
                "num_predict": self.config.ai_max_tokens,
                "temperature": self.config.ai_temperature
            }
        }

        data = self._post(f"{self.config.ollama_base_url.rstrip('/')}/api/generate", payload)
        return data["response"]
