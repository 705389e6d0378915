import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING
from src.utils.session_id import get_session_id
from config.governance_config import GovernanceConfig

if TYPE_CHECKING:
    from database.models.tag_change_request import TagChangeRequest
    from src.services.bulk_tags import BulkOutcome

_logger_instance: Optional['GovernanceLogger'] = None


def get_logger() -> 'GovernanceLogger':
    """Get the global logger instance. Creates one if needed."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = GovernanceLogger()
    return _logger_instance


class GovernanceLogger:
    """Universal logger for the tag governance services."""

    def __init__(self, config: Optional[GovernanceConfig] = None):
        self.session_id = get_session_id()
        self.config = config or GovernanceConfig.from_file()

        self.logger = logging.getLogger(f"tag_governance.{self.session_id}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.log_file = None

        # File handler - opt-in, one file per session
        if self.config.log_to_file:
            log_dir = Path("logs")
            log_dir.mkdir(exist_ok=True)
            self.log_file = log_dir / f"{self.session_id}.log"
            file_handler = logging.FileHandler(self.log_file)
            if self.config.verbose:
                file_handler.setLevel(logging.DEBUG)
            else:
                file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter('%(asctime)s %(message)s'))
            self.logger.addHandler(file_handler)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG if self.config.verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(console_handler)

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def detail(self, msg: str):
        """Indented detail message."""
        self.logger.info(f"   {msg}")

    # ─── Governance Events ─────────────────────────────────────────

    def staff_loaded(self, count: int, source: str):
        self.success(f"Loaded {count} staff records from {source}")

    def tags_applied(self, staff_id: str, old_tags: list[str], new_tags: list[str]):
        self.info(f"🏷️  Tags applied to {staff_id}: {old_tags} → {new_tags}")

    def tag_change_queued(self, request: 'TagChangeRequest'):
        self.info(
            f"📨 {request.requesting_actor} requested tags {request.new_tags} "
            f"for {request.staff_id} (request {request.id})"
        )
        self.debug(f"   Previous tags: {request.old_tags}")

    def request_resolved(self, request: 'TagChangeRequest'):
        self.info(
            f"📋 Request {request.id} for {request.staff_id} "
            f"{request.status.value} ({request.requesting_actor})"
        )
        if request.response_note:
            self.detail(f"Note: {request.response_note}")

    def tag_renamed(self, old_name: str, new_name: str, count: int):
        self.info(f"✏️  Renamed tag '{old_name}' → '{new_name}' on {count} staff")

    def tag_deleted(self, name: str, count: int):
        self.info(f"🗑️  Deleted tag '{name}' from {count} staff")

    def tag_created(self, name: str):
        self.info(f"➕ Created tag '{name}'")

    def bulk_summary(self, outcome: 'BulkOutcome'):
        self.info(f"📦 {outcome}")
        for staff_id in outcome.skipped_ids:
            self.debug(f"   Skipped {staff_id}: not found")
        for staff_id in outcome.truncated_ids:
            self.debug(f"   Truncated {staff_id}: tag limit reached")
