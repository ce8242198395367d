"""
Walks a container through every public operation in order:
add, render, size, get, contains, index_of, remove_at, remove, clear.

Run with: python -m linked_container.demo
"""

from p2pd import *
from .container_defs import *
from .linked_list import *
from .txt_strs import *

def fmt(value):
    # Booleans print lowercase.
    if isinstance(value, bool):
        return TXTS[value]
    return str(value)

def print_state(container, out):
    out(TXTS["size"] + fmt(container.size()))
    out(TXTS["is_empty"] + fmt(container.is_empty()))

def run_demo(container=None, out=None):
    out = out or print
    container = LinkedListContainer() if container is None else container
    out(TXTS["title"])
    for item in DEMO_ITEMS:
        container.add(item)

    out(str(container))
    out(TXTS["after_add"] + str(container))
    print_state(container, out)

    out(TXTS["sections"]["access"])
    for index in (1, 2):
        out(TXTS["element_at"] % (index,) + fmt(container.get(index)))

    out(TXTS["sections"]["exists"])
    for item in ("Apple", "Mango"):
        out(TXTS["contains"] % (item,) + fmt(container.contains(item)))

    out(TXTS["sections"]["index"])
    for item in ("Orange", "Mango"):
        out(TXTS["index_of"] % (item,) + fmt(container.index_of(item)))

    out(TXTS["sections"]["remove_index"])
    removed = container.remove_at(1)
    out(TXTS["removed_at"] % (1,) + fmt(removed))
    out(TXTS["after_remove"] + str(container))

    out(TXTS["sections"]["remove_value"])
    was_removed = container.remove("Grape")
    out(TXTS["removed_value"] % ("Grape",) + fmt(was_removed))
    out(TXTS["after_remove"] + str(container))

    out(TXTS["sections"]["clear"])
    container.clear()
    out(TXTS["after_clear"] + str(container))
    print_state(container, out)

    out(TXTS["done"])
    return container.snapshot()

def main():
    try:
        return run_demo()
    except Exception:
        what_exception()
        log_exception()
        raise

if __name__ == "__main__":
    main()
