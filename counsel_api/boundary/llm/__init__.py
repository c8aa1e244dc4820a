"""
Completion service boundary.

Exports:
  - CompletionClient: Gemini chat model wrapper returning reply text
"""

from counsel_api.boundary.llm.completion_client import CompletionClient

__all__ = ["CompletionClient"]
