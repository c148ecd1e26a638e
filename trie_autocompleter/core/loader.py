# loader.py - reads whitespace separated words from a text file for LOAD

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from trie_autocompleter.core.errors import DictionaryLoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_tokens(path: PathLike, encoding: str = "utf8") -> List[str]:
    """
    Return every whitespace separated token of the file at `path`.
    The whole file is read before anything is returned, so an I/O error
    surfaces before the caller inserts a single word.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("load failed for %s: %s", path, e)
        raise DictionaryLoadError(str(path), e) from e
    return text.split()
