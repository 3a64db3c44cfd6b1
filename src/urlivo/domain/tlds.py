"""src/urlivo/domain/tlds.py

Known top-level-domain suffixes.

The table is a membership-test set over single-label (``org``) and compound
(``co.uk``) suffixes, stored in their Unicode form so that hosts can be
matched after Punycode decoding.
"""

import functools
import logging
import os
from importlib import resources
from typing import Iterable, Iterator, Union

from urlivo.codec.punycode import decode_host

__all__ = ["TldTable", "DEFAULT_TLD_RESOURCE"]

logger = logging.getLogger(__name__)

DEFAULT_TLD_RESOURCE = "effective_tld_names.dat"


def _normalize(suffix: str) -> str:
    return decode_host(suffix.strip().strip(".").lower())


class TldTable:
    """
    Immutable set of known TLD suffixes.

    Read-only after construction; safe to share between threads.
    """

    __slots__ = ("_suffixes",)

    def __init__(self, suffixes: Iterable[str] = ()):
        self._suffixes = frozenset(
            normalized for normalized in map(_normalize, suffixes) if normalized
        )

    def is_known_tld(self, suffix: str) -> bool:
        """
        Check whether a suffix is a known TLD.

        Args:
            suffix: Dot-joined Unicode suffix such as ``org``, ``co.uk`` or
                ``рф``; matched case-insensitively. ``xn--`` labels are not
                decoded here, so pass hostnames through
                :func:`urlivo.codec.punycode.decode_host` first.

        Returns:
            True if the suffix is in the table.
        """
        return suffix.lower() in self._suffixes

    def __contains__(self, suffix: object) -> bool:
        return isinstance(suffix, str) and self.is_known_tld(suffix)

    def __iter__(self) -> Iterator[str]:
        return iter(self._suffixes)

    def __len__(self) -> int:
        return len(self._suffixes)

    def __repr__(self) -> str:
        return f"<TldTable: {len(self._suffixes)} suffixes>"

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TldTable":
        """
        Build a table from lines in Public Suffix List format.

        Comments (``//`` to end of line) and blank lines are skipped; exception
        (``!``) and wildcard (``*.``) prefixes are stripped.
        """
        suffixes = []
        for line in lines:
            rule = line.split("//", 1)[0].strip()
            if not rule:
                continue
            # only the first token of a line is the rule
            rule = rule.split()[0].lstrip("!")
            while rule.startswith("*."):
                rule = rule[2:]
            suffixes.append(rule)
        return cls(suffixes)

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "TldTable":
        """Load a table from a Public Suffix List file on disk."""
        with open(path, encoding="utf-8") as fh:
            table = cls.from_lines(fh)
        logger.debug("Loaded %d TLD suffixes from %s", len(table), path)
        return table

    @classmethod
    def default(cls) -> "TldTable":
        """
        Return the process-wide table built from the packaged suffix list.

        Loaded once, on first use. The packaged list is a partial copy of the
        Public Suffix List: every generic and country-code TLD plus common
        second-level suffixes such as ``co.uk`` or ``com.au``. Suffixes it
        lacks leave the whole hostname in ``host``; load the full list with
        :meth:`from_file` and pass it to :class:`urlivo.url.parser.URLParser`
        when that matters.
        """
        return _load_default()


@functools.lru_cache(maxsize=None)
def _load_default() -> TldTable:
    text = (
        resources.files(__package__)
        .joinpath(DEFAULT_TLD_RESOURCE)
        .read_text(encoding="utf-8")
    )
    table = TldTable.from_lines(text.splitlines())
    logger.debug("Loaded %d TLD suffixes from %s", len(table), DEFAULT_TLD_RESOURCE)
    return table
