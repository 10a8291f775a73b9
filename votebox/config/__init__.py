"""Configuration module for VoteBox.

Available Configurations:
- GovernanceConfig: proxy limits and quorum defaults
"""

from votebox.config.governance_config import (
    DEFAULT_GOVERNANCE_CONFIG,
    SINGLE_PROXY_GOVERNANCE_CONFIG,
    GovernanceConfig,
)

__all__ = [
    "DEFAULT_GOVERNANCE_CONFIG",
    "GovernanceConfig",
    "SINGLE_PROXY_GOVERNANCE_CONFIG",
]
