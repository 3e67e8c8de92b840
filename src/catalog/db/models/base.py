from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class IDPrimaryKey:
    # Integer primary key doubles as the link field between parents and children
    id = Column(
        Integer,
        primary_key=True,
        index=True,
        unique=True,
    )
