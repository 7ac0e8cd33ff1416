"""
agent - Conversational agent orchestration layer.

Contains the workflow tools, memory, prompt, router, and the executor that
runs the LLM+tool loop. Depends on domain/ and application/. Never imports
from infrastructure/.
"""
