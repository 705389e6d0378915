"""
Streamlit Dashboard Application.

This is a simple internal UI for:
- Browsing the staff roster as the league office or a club
- Editing staff tags, one at a time or in bulk
- Reviewing and tracking tag change requests

The UI is intentionally simple and calls TagGovernanceService for all data.
"""

__version__ = "0.1.0"
