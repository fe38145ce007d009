from sqlalchemy import Column, ForeignKey, Integer, String
from .base import Base


class Category(Base):
    __tablename__ = "category"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    department_id = Column(Integer, ForeignKey("department.department_id"), nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=True)
