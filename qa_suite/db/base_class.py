# /qa_suite/db/base_class.py

from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    """
    Declarative base for every ORM model.
    Table names default to the lowercase class name plus an "s"; models that
    need a different name set `__tablename__` explicitly.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"
