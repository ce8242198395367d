from typing import Any, TypeVar

T = TypeVar("T")

# Position reported by index_of when nothing matches.
NOT_FOUND = -1

RENDER_OPEN = "["
RENDER_CLOSE = "]"
RENDER_SEPARATOR = ", "
EMPTY_RENDER = RENDER_OPEN + RENDER_CLOSE

DEMO_ITEMS = ("Apple", "Banana", "Orange", "Grape")

####################################################################################
class InvalidArgument(ValueError):
    """Raised when a null element is added."""
    pass

class IndexOutOfRange(IndexError):
    """Raised when a position is outside [0, size)."""
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")

def ensure_index_type(index: Any):
    # bool is an int subclass but never a position.
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError("index must be an int")
