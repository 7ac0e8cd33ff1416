"""
Test settings loading and LLM construction errors.
"""

from pathlib import Path

import pytest

from domain.exceptions import ConfigurationError
from infrastructure.config import Settings
from infrastructure.llm.llm_builder import build_llm

_ENV_VARS = (
    "LLM_PROVIDER", "LLM_MODEL_GROQ", "WORKFLOW_API_URL", "HTTP_TIMEOUT",
    "TOOL_CALL_TIMEOUT", "AGENT_MAX_ITERATIONS", "SYSTEM_PROMPT_PATH", "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so that teardown also removes values loaded from a .env file
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    config = Settings.from_env(tmp_path / "missing.env")

    assert config.llm_provider == "openai"
    assert config.workflow_api_url == "http://localhost:3000/api/workflows"
    assert config.http_timeout == 10.0
    assert config.agent_max_iterations == 10
    assert config.system_prompt_path is None
    assert config.log_level == "WARNING"


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("LLM_PROVIDER", " Groq ")
    clean_env.setenv("LLM_MODEL_GROQ", "mixtral-8x7b")
    clean_env.setenv("WORKFLOW_API_URL", "https://tasks.example.com/api/workflows")
    clean_env.setenv("TOOL_CALL_TIMEOUT", "2.5")
    clean_env.setenv("AGENT_MAX_ITERATIONS", "4")
    clean_env.setenv("SYSTEM_PROMPT_PATH", "prompts/custom.txt")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = Settings.from_env(tmp_path / "missing.env")

    assert config.llm_provider == "groq"
    assert config.active_llm_model == "mixtral-8x7b"
    assert config.workflow_api_url == "https://tasks.example.com/api/workflows"
    assert config.tool_call_timeout == 2.5
    assert config.agent_max_iterations == 4
    assert config.system_prompt_path == Path("prompts/custom.txt")
    assert config.log_level == "DEBUG"


def test_env_file_is_read(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("WORKFLOW_API_URL=http://10.0.0.5:3000/api/workflows\n", encoding="utf-8")

    config = Settings.from_env(env_file)
    assert config.workflow_api_url == "http://10.0.0.5:3000/api/workflows"


def test_unknown_provider_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_llm(provider="anthropic-cloud", model="x")


def test_openai_without_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_llm(provider="openai", model="gpt-4.1-mini", openai_api_key="")
