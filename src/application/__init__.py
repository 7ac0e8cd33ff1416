"""
application - Session context and DTOs shared by the agent and adapters.
"""
