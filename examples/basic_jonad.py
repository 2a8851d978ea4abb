"""
Basic containers: composition, stored errors, fallbacks, and logging.

Run: python examples/basic_jonad.py
"""
from dataclasses import dataclass

from jonad import (
    Jonad,
    Chunk,
    Some,
    ConsoleLogger,
    error_kinds,
)


@dataclass(frozen=True)
class NotFound:
    key: str


USERS = {"ada": {"name": "Ada", "age": "36"}, "bob": {"name": "Bob", "age": "n/a"}}


def lookup(key: str):
    # Missing users come back as a stored error value, not an exception
    return USERS.get(key, NotFound(key))


def main():
    logger = ConsoleLogger(name="demo", level="DEBUG")

    # map/filter chains with a terminal default
    name = Jonad.of("ada").map(lookup).map(lambda u: u["name"]).log(logger, "name").get_or_default("?")
    print("name =>", name)  # Ada

    # try_map keeps the original value when parsing fails
    age = Jonad.of(USERS["bob"]["age"]).try_map(int).get_or_none()
    print("bob.age =>", age)  # n/a

    # Stored errors are recovered by the error-shaped operators
    with error_kinds(NotFound):
        recovered = (
            Jonad.of("zed")
            .map(lookup)
            .log(logger, "lookup")
            .on_error_map(lambda e: {"name": f"guest:{e.key}", "age": "0"})
            .map(lambda u: u["name"])
            .get_or_none()
        )
    print("recovered =>", recovered)  # guest:zed

    # Boundary adapters: foreign optionals in, restartable sequences out
    print("or_empty =>", Jonad.or_empty(Some("x")))  # Present(value='x')
    ages = Chunk.from_iterable(USERS.values()).flat_map(
        lambda u: Jonad.of(u["age"]).try_map(int).filter(lambda v: isinstance(v, int))
    )
    print("ages =>", ages.to_list())  # [36]

    # Empty containers raise only when asked to
    try:
        Jonad.empty().or_else_raise(lambda: KeyError("nothing here"))
    except KeyError as e:
        print("raised =>", repr(e))


if __name__ == "__main__":
    main()
