"""
Domain Ports Package

Architectural Intent:
- Contracts for the collaborators the validation engine delegates to
- Ports define what the domain needs, adapters implement how
"""

from ecsguard.domain.ports.capacity_port import CapacityValidatorPort
from ecsguard.domain.ports.credentials_port import CredentialsValidatorPort

__all__ = [
    "CapacityValidatorPort",
    "CredentialsValidatorPort",
]
