from sqlalchemy import Column, Integer, Numeric, String
from .base import Base


class Tax(Base):
    __tablename__ = "tax"

    tax_id = Column(Integer, primary_key=True, autoincrement=True)
    tax_type = Column(String(100), nullable=False)
    tax_percentage = Column(Numeric(10, 2), nullable=False)
