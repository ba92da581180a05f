from sqlalchemy import BigInteger, CheckConstraint, Column, Date, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.db.base import Base


class Rental(Base):
    __tablename__ = "rentals"
    __table_args__ = (
        CheckConstraint("days_rented > 0", name="ck_rentals_days_rented_positive"),
        CheckConstraint(
            "return_date IS NOT NULL OR delay_fee IS NULL",
            name="ck_rentals_delay_fee_only_when_returned",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    rent_date = Column(Date, nullable=False)
    days_rented = Column(Integer, nullable=False)
    original_price = Column(BigInteger, nullable=False)
    return_date = Column(Date, nullable=True)
    delay_fee = Column(BigInteger, nullable=True)

    # Relationships
    customer = relationship("Customer", backref="rentals")
    game = relationship("Game", backref="rentals")
