"""
Main application package for the Staff Tag Governance service.

This is the core backend providing:
- Tag rules and the league/club approval workflow
- Tag registry curation (rename, delete, create)
- Role-based roster visibility
- Governance events for the presentation layer

The services are consumed by:
- Internal Streamlit dashboard (streamlit_app/)
- Other league tools that embed TagGovernanceService
"""

__version__ = "0.1.0"
