from typing import Generator, List, Sequence

__all__ = ["gen_fuzz_lists"]


def gen_fuzz_lists(
    allowed_items: Sequence[str], max_length: int
) -> Generator[List[str], None, None]:
    """Generator that produces all lists of allowed items up to the max length."""
    num_allowed_items = len(allowed_items)

    num_combinations = 0
    for length in range(1, max_length + 1):
        num_combinations += num_allowed_items**length

    yield []  # special case for empty list
    for combination in range(num_combinations):
        items: List[str] = []

        left_over = combination
        while left_over >= 0:
            reminder = left_over % num_allowed_items
            items.insert(0, allowed_items[reminder])
            left_over = (left_over - reminder) // num_allowed_items - 1

        yield items
