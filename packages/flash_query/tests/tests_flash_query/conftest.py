import logging
from dataclasses import dataclass

import pytest
from flash_query import Query, QuerySettings, wrap


@dataclass
class Person:
    name: str
    age: int

    def __str__(self) -> str:
        return f"{self.name}: {self.age}"


@pytest.fixture
def numbers() -> Query[int]:
    return wrap([1, 2, 3, 4, 5])


@pytest.fixture
def empty() -> Query[int]:
    return wrap([])


@pytest.fixture
def people() -> Query[Person]:
    return wrap(
        [
            Person("Bob", 31),
            Person("Jenny", 26),
            Person("John", 42),
            Person("Michael", 17),
        ]
    )


@pytest.fixture
def strict_settings() -> QuerySettings:
    return QuerySettings(STRICT_BOUNDS=True)


@pytest.fixture
def debug_settings() -> QuerySettings:
    return QuerySettings(DEBUG=True)


@pytest.fixture
def restore_package_logger():
    """Undo handler/propagation changes made by setup_logging()."""
    target = logging.getLogger("flash_query")
    handlers, level, propagate = list(target.handlers), target.level, target.propagate
    yield target
    target.handlers[:] = handlers
    target.setLevel(level)
    target.propagate = propagate
