"""
infrastructure.http - HTTP clients for remote services.
"""
