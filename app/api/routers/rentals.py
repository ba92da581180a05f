from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_rental_service
from app.services.rental import RentalLifecycleService
from app.schemas.rental import Rental, RentalCreate

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("", response_model=list[Rental])
def get_all_rentals(
    customer_id: int | None = Query(
        None, alias="customerId", description="Only rentals of this customer"
    ),
    game_id: int | None = Query(None, alias="gameId", description="Only rentals of this game"),
    service: RentalLifecycleService = Depends(get_rental_service),
):
    """Get all rentals with their customer and game."""
    rentals = service.list_rentals(customer_id=customer_id, game_id=game_id)
    return [Rental.model_validate(rental) for rental in rentals]


@router.post("", response_model=Rental, status_code=status.HTTP_201_CREATED)
def create_new_rental(
    rental_data: RentalCreate,
    service: RentalLifecycleService = Depends(get_rental_service),
):
    """
    Rent a game to a customer.

    Fails with 400 if the customer or game does not exist or the game has
    no unit available.
    """
    rental = service.create_rental(
        customer_id=rental_data.customer_id,
        game_id=rental_data.game_id,
        days_rented=rental_data.days_rented,
    )
    return Rental.model_validate(rental)


@router.post("/{rental_id}/return", response_model=Rental, status_code=status.HTTP_201_CREATED)
def return_rental(
    rental_id: int,
    service: RentalLifecycleService = Depends(get_rental_service),
):
    """
    Close a rental as of today, charging a delay fee if it is late.
    """
    rental = service.return_rental(rental_id)
    return Rental.model_validate(rental)


@router.delete("/{rental_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rental(
    rental_id: int,
    service: RentalLifecycleService = Depends(get_rental_service),
):
    """
    Delete a rental. Only returned rentals can be deleted.
    """
    service.cancel_rental(rental_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
