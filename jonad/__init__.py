from .monad import Monad
from .jonad import (
    Jonad,
    Present,
    EMPTY,
    of,
    empty,
    from_supplier,
    or_empty,
)
from .option import Option, OptionLike, Some, NONE, from_nullable
from .chunk import Chunk
from .errors import Failure, NoValueError, current_error_kinds, error_kinds, is_error
from .logger import ConsoleLogger
