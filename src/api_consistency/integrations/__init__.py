"""Integrations subpackage for api-consistency.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_apis_consistent`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
