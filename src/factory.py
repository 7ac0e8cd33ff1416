"""
factory - Composition root for the workflow task agent.

ALL dependency wiring happens here. No other module constructs its own
dependencies. Adapters (the CLI) call this factory to get fully configured
agents.

Usage:
    from factory import ServiceFactory
    from infrastructure.config import Settings

    factory = ServiceFactory(Settings.from_env())
    agent = factory.create_agent()
    result = await agent.run(ctx, user_input)
"""

from __future__ import annotations

import logging
from typing import Optional

from langchain_core.language_models import BaseChatModel

from agent.executor import AgentExecutor
from agent.memory import ConversationMemory
from agent.orchestrator import Orchestrator
from agent.prompt import load_prompt_template
from agent.tool_executor import ToolExecutor
from agent.tools import build_workflow_registry
from agent.tools.registry import ToolRegistry
from domain.ports import ChatModelPort, WorkflowStorePort
from infrastructure.config import Settings
from infrastructure.http.workflow_store import HttpWorkflowStore
from infrastructure.llm.chat_model import LangChainChatModel
from infrastructure.llm.llm_builder import build_llm

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Composition root — wires all dependencies together.

    The store and the model can be injected (tests, alternative backends);
    otherwise they are built from settings on first use.
    """

    def __init__(
        self,
        config: Settings,
        *,
        store: Optional[WorkflowStorePort] = None,
        model: Optional[ChatModelPort] = None,
    ):
        self._config = config
        self._store = store
        self._model = model

    # ------------------------------------------------------------------
    # Service creation
    # ------------------------------------------------------------------

    def create_workflow_store(self) -> WorkflowStorePort:
        """Return the workflow store client (shared across sessions; stateless)."""
        if self._store is None:
            self._store = HttpWorkflowStore(
                base_url=self._config.workflow_api_url,
                timeout=self._config.http_timeout,
            )
            logger.info("Workflow API at %s", self._config.workflow_api_url)
        return self._store

    def create_tool_registry(self) -> ToolRegistry:
        """Create the registry with all six workflow operations."""
        return build_workflow_registry(self.create_workflow_store())

    def create_chat_model(self) -> ChatModelPort:
        """Return the model boundary adapter."""
        if self._model is None:
            self._model = LangChainChatModel(self._build_agent_llm())
        return self._model

    # ------------------------------------------------------------------
    # Agent creation
    # ------------------------------------------------------------------

    def create_agent(self) -> AgentExecutor:
        """Create a fully configured AgentExecutor for one session.

        Each call returns an executor with its own ConversationMemory.
        """
        registry = self.create_tool_registry()
        orchestrator = Orchestrator(
            model=self.create_chat_model(),
            registry=registry,
            prompt_template=load_prompt_template(self._config.system_prompt_path),
            call_timeout=self._config.model_call_timeout,
        )
        return AgentExecutor(
            orchestrator=orchestrator,
            tool_executor=ToolExecutor(registry, call_timeout=self._config.tool_call_timeout),
            memory=ConversationMemory(),
            max_iterations=self._config.agent_max_iterations,
            session_timeout=self._config.session_timeout,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_agent_llm(self) -> BaseChatModel:
        """Build the LLM for the conversational agent."""
        return build_llm(
            provider=self._config.llm_provider,
            model=self._config.active_llm_model,
            temperature=self._config.llm_temperature,
            ollama_base_url=self._config.ollama_base_url,
            openai_api_key=self._config.openai_api_key,
            groq_api_key=self._config.groq_api_key,
            timeout=self._config.model_call_timeout,
        )
