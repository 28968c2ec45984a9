"""
CRMHub Role and User Models
"""

from sqlalchemy import Column, Integer, String, JSON, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base


class Role(Base):
    """Role with a privilege level (lower = more privileged)"""
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True)
    level = Column(Integer)
    permissions = Column(JSON)

    def __repr__(self):
        return f"<Role(name='{self.name}', level={self.level})>"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True)
    password = Column(String)
    role_id = Column(Integer, ForeignKey("roles.id"))
    department = Column(String)

    role = relationship("Role")

    def __repr__(self):
        return f"<User(username='{self.username}', department='{self.department}')>"
