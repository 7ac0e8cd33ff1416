"""
Run the Workflow Task Agent CLI.

Usage:
    python run_cli.py [COMMAND] [OPTIONS]

Commands:
    ask        One-shot request to the agent
    chat       Interactive session with conversation memory
    tools      List the workflow operations

Examples:
    python run_cli.py ask "add a pending task: review PR 12"
    python run_cli.py chat

Environment variables (all optional, .env supported):
    LLM_PROVIDER        "openai", "groq", or "ollama" (default: openai)
    LLM_MODEL_OPENAI    Model name when LLM_PROVIDER=openai (default: gpt-4.1-mini)
    LLM_MODEL_GROQ      Model name when LLM_PROVIDER=groq (default: llama-3.3-70b-versatile)
    LLM_MODEL_OLLAMA    Model name when LLM_PROVIDER=ollama (default: llama3.2)
    OPENAI_API_KEY      Required when LLM_PROVIDER=openai
    GROQ_API_KEY        Required when LLM_PROVIDER=groq
    OLLAMA_BASE_URL     Ollama server URL (default: http://localhost:11434/)
    WORKFLOW_API_URL    Workflow API base URL (default: http://localhost:3000/api/workflows)
    HTTP_TIMEOUT        Seconds per HTTP request (default: 10)
    TOOL_CALL_TIMEOUT   Seconds per tool call (default: 30)
    MODEL_CALL_TIMEOUT  Seconds per model call (default: 60)
    SESSION_TIMEOUT     Seconds per user turn (default: 300)
    AGENT_MAX_ITERATIONS  Max model turns per user turn (default: 10)
    SYSTEM_PROMPT_PATH  File with a custom directive template
    LOG_LEVEL           Logging level (default: WARNING)
"""

import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

from adapters.cli.main import app

if __name__ == "__main__":
    app()
