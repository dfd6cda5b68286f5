"""Admin wallet endpoints: balance query and payment submission."""
from fastapi import APIRouter, Depends, Request

from admin_wallet.domain.payments import PaymentService, parse_payment_body
from admin_wallet.interfaces.http.deps import get_payment_service
from admin_wallet.interfaces.http.schemas import (
    BalanceResponse,
    ErrorResponse,
    PaymentRequest,
    PaymentResponse,
)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/", response_model=BalanceResponse, responses=ERROR_RESPONSES, summary="Admin account native balance")
async def get_balance(service: PaymentService = Depends(get_payment_service)) -> BalanceResponse:
    return BalanceResponse(balance=await service.get_balance())


@router.post(
    "/",
    response_model=PaymentResponse,
    responses=ERROR_RESPONSES,
    summary="Send a native payment from the admin account",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": PaymentRequest.model_json_schema()}},
        }
    },
)
async def send_payment(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse:
    # PaymentRequest is validated from the raw body so errors map to our own 400 rather than FastAPI's 422.
    intent = parse_payment_body(await request.body())
    result = await service.send_payment(intent)
    return PaymentResponse(result=dict(result.raw))
