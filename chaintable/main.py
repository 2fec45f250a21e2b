import sys

from .debug import check_table
from .shared import print_result, printf
from .table import HashTable, set_debug_trace_resize


_check = False


def step(table: HashTable):
    if _check:
        check_table(table)


def run_demo():
    table: HashTable[str, int] = HashTable()

    table.put("one", 1)
    table.put("two", 2)
    table.put("three", 3)
    step(table)
    print_result("get 'one'", table.get("one"))
    print_result("get 'two'", table.get("two"))

    table.put("two", 22)
    step(table)
    print_result("get 'two' after update", table.get("two"))

    print_result("remove 'three'", table.remove("three"))
    step(table)
    print_result("get 'three' after remove", table.get("three"))

    table.put(None, 0)
    print_result("get None", table.get(None))
    table.put(None, 999)
    step(table)
    print_result("get None after update", table.get(None))

    for i in range(20):
        table.put("key" + str(i), i)
    step(table)
    print_result("size after adding 20 keys", table.size())
    print_result("get 'key15'", table.get("key15"))

    print_result("contains 'one'", table.contains_key("one"))
    print_result("contains 'nonexistent'", table.contains_key("nonexistent"))

    table.clear()
    step(table)
    print_result("size after clear", table.size())
    print_result("is empty", table.is_empty())


def main():
    global _check

    for arg in sys.argv[1:]:
        if arg == "--trace":
            set_debug_trace_resize(True)
        elif arg == "--check":
            _check = True
        else:
            printf("Usage: chaintable-demo [--trace] [--check]\n")
            sys.exit(64)

    run_demo()
