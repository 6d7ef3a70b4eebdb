from fastapi import APIRouter, Depends

from vibecart.schemas.checkOutSchema import CheckOutRequest, ReceiptRead
from vibecart.crud.checkOutService import CheckOutService
from vibecart.dependencies.session_dependencies import cart_session

router = APIRouter()


@router.post(
    "/checkout",
    response_model=ReceiptRead,
    tags=["checkout"]
)
async def checkout(
        request: CheckOutRequest,
        session_id: str = Depends(cart_session)
):
    """
    Place an order for everything in the session's cart.
    Returns the receipt and empties the cart.
    """
    return await CheckOutService.checkout(session_id, request)
