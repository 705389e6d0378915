from dataclasses import dataclass, field
from pathlib import Path
import json
import os

DEFAULT_CONFIG_PATH = "config/governance_config.json"


@dataclass
class GovernanceConfig:
    """Configuration for the tag governance services."""
    max_tags: int = 5
    default_tags: list[str] = field(
        default_factory=lambda: ["Proven", "Emerging", "High Potential", "Homegrown"]
    )
    staff_data_path: str | None = None
    verbose: bool = False
    log_to_file: bool = False

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "GovernanceConfig":
        """Load config from a JSON file (GOVERNANCE_CONFIG overrides the default path)."""
        config_path = Path(path or os.getenv("GOVERNANCE_CONFIG", DEFAULT_CONFIG_PATH))
        if not config_path.exists():
            print(f"⚠️  Config file not found at {config_path}, using defaults")
            return cls()

        with open(config_path) as f:
            data = json.load(f)

        return cls(**data)
