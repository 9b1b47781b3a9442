"""Core business logic — submission checklists, karma tiers, and data models.

This module is framework-agnostic. It has no dependency on MCP or any server
framework, so the moderation backend can import it directly.
"""
