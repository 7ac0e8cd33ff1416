"""
domain - Value objects, ports, and exceptions.

No dependencies on infrastructure/, agent/, or adapters/.
"""
