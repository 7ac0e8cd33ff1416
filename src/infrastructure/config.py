"""
infrastructure.config - Typed, injectable configuration.

A frozen dataclass that can be constructed from the environment (and a
``.env`` file) or passed explicitly in tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the workflow task agent.

    No module-level globals — construct via from_env() or pass explicitly
    in tests.
    """

    # ── LLM Provider ────────────────────────────────────────────
    # Allowed: "openai", "groq", "ollama"
    llm_provider: str = "openai"

    # Model names — only the one matching llm_provider is used.
    llm_model_openai: str = "gpt-4.1-mini"
    llm_model_groq: str = "llama-3.3-70b-versatile"
    llm_model_ollama: str = "llama3.2"
    llm_temperature: float = 0.0

    # Connection details
    ollama_base_url: str = "http://localhost:11434/"
    openai_api_key: str = ""
    groq_api_key: str = ""

    # ── Workflow API ────────────────────────────────────────────
    workflow_api_url: str = "http://localhost:3000/api/workflows"
    http_timeout: float = 10.0

    # ── Agent loop ──────────────────────────────────────────────
    # Timeouts in seconds; 0 disables.
    tool_call_timeout: float = 30.0
    model_call_timeout: float = 60.0
    session_timeout: float = 300.0
    agent_max_iterations: int = 10
    system_prompt_path: Optional[Path] = None

    log_level: str = "WARNING"

    @property
    def active_llm_model(self) -> str:
        """Return the model name for the currently active LLM provider."""
        if self.llm_provider == "groq":
            return self.llm_model_groq
        elif self.llm_provider == "ollama":
            return self.llm_model_ollama
        return self.llm_model_openai

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> Settings:
        """Build Settings from environment variables (and .env if present)."""
        from dotenv import load_dotenv
        load_dotenv(env_file)

        prompt_path = os.getenv("SYSTEM_PROMPT_PATH", "")

        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "openai").lower().strip(),
            llm_model_openai=os.getenv("LLM_MODEL_OPENAI", "gpt-4.1-mini"),
            llm_model_groq=os.getenv("LLM_MODEL_GROQ", "llama-3.3-70b-versatile"),
            llm_model_ollama=os.getenv("LLM_MODEL_OLLAMA", "llama3.2"),
            llm_temperature=float(os.getenv("LLM_TEMPERATURE", "0")),
            ollama_base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            groq_api_key=os.getenv("GROQ_API_KEY", ""),

            workflow_api_url=os.getenv(
                "WORKFLOW_API_URL", "http://localhost:3000/api/workflows",
            ),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),

            tool_call_timeout=float(os.getenv("TOOL_CALL_TIMEOUT", "30")),
            model_call_timeout=float(os.getenv("MODEL_CALL_TIMEOUT", "60")),
            session_timeout=float(os.getenv("SESSION_TIMEOUT", "300")),
            agent_max_iterations=int(os.getenv("AGENT_MAX_ITERATIONS", "10")),
            system_prompt_path=Path(prompt_path) if prompt_path else None,

            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )
