"""A minimal line-oriented configuration format of flat (section, key, value) entries."""

from .entry import Entry, from_dict, to_dict
from .errors import EncodingError, FlatiniError, MalformedLineError
from .reader import load, loads, read
from .writer import dump, dumps, write

__version__ = "0.1.0"
