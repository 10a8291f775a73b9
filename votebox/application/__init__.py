"""
Application layer - Use cases and orchestration for VoteBox.

This layer contains:
- Governance services (proxy registry, quorum, voting, scheduling)
- Port definitions (abstract interfaces for infrastructure)
- Input models

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, bootstrap
"""

from votebox.application.ports import TimeAuthorityProtocol

__all__: list[str] = ["TimeAuthorityProtocol"]
