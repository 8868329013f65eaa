"""Test utilities"""

from .gen_fuzz_lists import gen_fuzz_lists
from .text_sink import TextSink


__all__ = ["gen_fuzz_lists", "TextSink"]
