"""
infrastructure.llm - Chat model construction and the model boundary adapter.
"""
