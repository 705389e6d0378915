"""
Logging package - Governance logger.

Usage:
    from src.logging import get_logger

    logger = get_logger()
    logger.info("Loading staff...")
    logger.success("Completed!")
"""

from src.logging.logger import get_logger, GovernanceLogger

__all__ = [
    "get_logger",
    "GovernanceLogger",
]
