"""
infrastructure.llm.chat_model - LangChain adapter for the model boundary.

Implements ChatModelPort on top of any LangChain BaseChatModel that supports
tool calling. The directive is prepended as a SystemMessage on every call
and never written back into the conversation.
"""

from __future__ import annotations

import logging
from typing import Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, SystemMessage
from langchain_core.tools import BaseTool as LangChainTool

logger = logging.getLogger(__name__)


class LangChainChatModel:
    """Bind the declared tools and invoke the wrapped chat model."""

    def __init__(self, llm: BaseChatModel):
        self._llm = llm

    async def invoke(
        self,
        directive: str,
        history: Sequence[BaseMessage],
        tools: Sequence[LangChainTool],
    ) -> AIMessage:
        bound = self._llm.bind_tools(list(tools)) if tools else self._llm
        messages = [SystemMessage(content=directive), *history]
        logger.debug("Invoking chat model with %d message(s)", len(messages))
        response = await bound.ainvoke(messages)
        if not isinstance(response, AIMessage):
            # Some providers return a bare BaseMessage; normalise it.
            response = AIMessage(content=response.content)
        return response
