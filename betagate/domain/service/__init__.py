"""Domain services."""

from .beta_invite_service import BetaInviteService
from .code_generator import CodeGenerator, RandomCodeGenerator
from .field_schema import InviteFieldSchema
from .invite_notifier import InviteNotifier, NoopInviteNotifier
from .origin_policy import OriginPolicy, TrustedOriginPolicy
from .registration import RegistrationClient
from .registration_gate import RegistrationGate

__all__ = [
    "BetaInviteService",
    "CodeGenerator",
    "InviteFieldSchema",
    "InviteNotifier",
    "NoopInviteNotifier",
    "OriginPolicy",
    "RandomCodeGenerator",
    "RegistrationClient",
    "RegistrationGate",
    "TrustedOriginPolicy",
]
