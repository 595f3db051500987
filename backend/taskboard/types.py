from sqlalchemy.types import TypeDecorator, JSON as SAJSON
from sqlalchemy.dialects.postgresql import JSONB


class JSONList(TypeDecorator):
    """
    Ordered list stored as PostgreSQL JSONB, or generic JSON on other DBs (e.g., SQLite).
    NULL decodes to an empty list so readers never see None.
    """
    impl = SAJSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(SAJSON())

    def process_result_value(self, value, dialect):
        if not isinstance(value, list):
            return []
        return value
