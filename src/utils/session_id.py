from datetime import datetime

_session_id: str = None


def get_session_id() -> str:
    """
    Get or create the current session ID.

    First call creates it. All subsequent calls return the same value.
    Used by the logger for file naming.
    """
    global _session_id
    if _session_id is None:
        _session_id = datetime.now().strftime("%Y_%m_%d_%H%M%S")
    return _session_id
