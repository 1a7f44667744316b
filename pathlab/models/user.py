"""
User model definition
"""

from sqlalchemy import Column, Integer, String

from pathlab.models.base import Base


class User(Base):
    """Lab staff account"""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    full_name = Column(String(100), nullable=True)
    password = Column(String(255), nullable=False)
    role = Column(String(30), nullable=True)
    contact_number = Column(String(20), nullable=True)
    question = Column(String(255), nullable=True)
    answer = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, username='{self.username}')>"
