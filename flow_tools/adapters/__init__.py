"""Tool Adapters.

Available adapters:
- n8n: workflow, execution and credential management over the n8n public API
"""

__all__ = ["n8n"]
