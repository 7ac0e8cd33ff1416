"""
adapters - Entry points (CLI) that drive the agent through factory.py.
"""
