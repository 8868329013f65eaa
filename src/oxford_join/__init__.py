"""Oxford Join

Join lists of strings with Oxford commas inserted as necessary, using the
conjunction of your choice::

    >>> from oxford_join import and_list, oxford_join, Conjunction
    >>> and_list(["apples", "oranges", "bananas"])
    'apples, oranges, and bananas'
    >>> oxford_join(["apples", "oranges"], Conjunction.OR)
    'apples or oranges'

The formatting depends on the number of items::

    0: ""
    1: "first"
    2: "first <conjunction> last"
    n: "first, second, ..., <conjunction> last"

Besides the eager functions, there are lazily rendered variants which can be
written into a text sink or used in f-strings without creating an intermediate
joined string.
"""

# The version of this package
from .version import version, version_info, VersionInfo

# Conjunctions
from .conjunction import Conjunction, ConjunctionKind, ConjunctionLike

# Eager joining
from .join import (
    and_list,
    and_or_list,
    join_capacity,
    nor_list,
    or_list,
    oxford_join,
    oxford_join_length,
)

# Lazy joining
from .format import JoinFormat, OxfordJoinFormat, Sink, oxford_join_lazy

__all__ = [
    "version",
    "version_info",
    "VersionInfo",
    "__version__",
    "__version_info__",
    "Conjunction",
    "ConjunctionKind",
    "ConjunctionLike",
    "and_list",
    "and_or_list",
    "join_capacity",
    "nor_list",
    "or_list",
    "oxford_join",
    "oxford_join_length",
    "JoinFormat",
    "OxfordJoinFormat",
    "Sink",
    "oxford_join_lazy",
]

__version__ = version
__version_info__ = version_info
