# Local application imports
from ...dto.auth_dto import SigninResponse


SIGNIN_ACKNOWLEDGEMENT = "I have signed in"


class SigninUserUseCase:
    """Use case for signin. Acknowledges only; no credential check, no token."""

    async def execute(self) -> SigninResponse:
        return SigninResponse(msg=SIGNIN_ACKNOWLEDGEMENT)
