"""Beta access use cases."""

from betagate.application.usecase.beta.add_beta_user import (
    AddBetaUserRequest,
    AddBetaUserUseCase,
    BetaInviteItem,
)
from betagate.application.usecase.beta.check_code import (
    CheckCodeRequest,
    CheckCodeResponse,
    CheckCodeUseCase,
)
from betagate.application.usecase.beta.confirm_sign_up import (
    ConfirmSignUpRequest,
    ConfirmSignUpResponse,
    ConfirmSignUpUseCase,
)
from betagate.application.usecase.beta.remove_beta_user import (
    RemoveBetaUserRequest,
    RemoveBetaUserResponse,
    RemoveBetaUserUseCase,
)
from betagate.application.usecase.beta.sign_up import (
    SignUpBetaUserRequest,
    SignUpBetaUserUseCase,
)

__all__ = [
    "AddBetaUserRequest",
    "AddBetaUserUseCase",
    "BetaInviteItem",
    "CheckCodeRequest",
    "CheckCodeResponse",
    "CheckCodeUseCase",
    "ConfirmSignUpRequest",
    "ConfirmSignUpResponse",
    "ConfirmSignUpUseCase",
    "RemoveBetaUserRequest",
    "RemoveBetaUserResponse",
    "RemoveBetaUserUseCase",
    "SignUpBetaUserRequest",
    "SignUpBetaUserUseCase",
]
