from enum import Enum


class IsolationLevel(Enum):
    DEFAULT = "default"
    READ_UNCOMMITTED = "read_uncommitted"
    READ_COMMITTED = "read_committed"
    WRITE_COMMITTED = "write_committed"
    REPEATABLE_READ = "repeatable_read"
    SNAPSHOT = "snapshot"
    SERIALIZABLE = "serializable"
    LINEARIZABLE = "linearizable"

    @classmethod
    def from_any(cls, value):
        if value is None:
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            if normalized == "":
                return cls.DEFAULT
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(f"Cannot parse {value!r} into {cls.__name__}")
