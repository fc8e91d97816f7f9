from sqlalchemy.orm import as_declarative


@as_declarative()
class Base:
    """Base class for all database models."""
