"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from identity.account.registration import RegisterAccount
from identity.api.schemas import AccountIdResponse, RegisterAccountRequest

router = APIRouter(prefix="/api", tags=["accounts"])


@router.post("/account", status_code=201, response_model=AccountIdResponse)
def register_account(body: RegisterAccountRequest) -> AccountIdResponse:
    command = RegisterAccount(
        username=body.username,
        password=body.password,
        email=body.email,
        role=body.role,
    )
    # Plain def: FastAPI runs it in the threadpool while the password is hashed
    result = current_domain.process(command, asynchronous=False)
    return AccountIdResponse(account_id=result)
