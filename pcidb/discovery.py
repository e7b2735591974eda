from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .db import PciDb
from .errors import MalformedInput, PciIdsError, UnreadableInput

log = logging.getLogger(__name__)

SYSTEM_PCI_IDS = ("/usr/share/hwdata/pci.ids", "/usr/share/misc/pci.ids")


@dataclass(frozen=True)
class Candidate:
    """Represents a potential DB source in the discovery order."""

    kind: str  # "path", "env", "system"
    ref: str  # path, for debugging
    opener: Callable[[], PciDb]  # returns an opened DB instance, or raises


def _resolve_candidates(
    *,
    explicit_path: Optional[str],
    env_path: Optional[str],
    system_paths: Sequence[str],
    allow_system: bool,
) -> List[Candidate]:
    """
    Build an ordered list of candidates. Pure function -> easy to unit test:
    pass in env values and the system paths to consider.
    """

    def opener(p: str) -> Callable[[], PciDb]:
        return lambda: PciDb.from_file(p)

    # Explicit path (single-candidate short path)
    if explicit_path:
        return [Candidate("path", explicit_path, opener(explicit_path))]

    cands: List[Candidate] = []
    if env_path:
        cands.append(Candidate("env", env_path, opener(env_path)))
    if allow_system:
        for p in system_paths:
            cands.append(Candidate("system", p, opener(p)))
    return cands


# -------- public entry --------


def discover_db_path(path: Optional[str] = None) -> str:
    """First existing candidate file, without parsing it."""
    for c in _candidates_from_env(path):
        if Path(c.ref).is_file():
            return c.ref
    raise UnreadableInput(path or "<none>", "no pci.ids database found")


def _candidates_from_env(path: Optional[str]) -> List[Candidate]:
    return _resolve_candidates(
        explicit_path=path,
        env_path=os.getenv("PCIDB_IDS"),
        system_paths=SYSTEM_PCI_IDS,
        allow_system=os.getenv("PCIDB_NO_SYSTEM") != "1",
    )


def open_db(path: Optional[str] = None) -> PciDb:
    last_err: Optional[Exception] = None
    for c in _candidates_from_env(path):
        try:
            db = c.opener()
        except MalformedInput:
            # malformed content is fatal, only missing/empty sources fall through
            raise
        except (PciIdsError, ValueError) as e:
            log.debug("skipping %s candidate %s: %s", c.kind, c.ref, e)
            last_err = e
            continue
        log.debug("using %s candidate %s", c.kind, c.ref)
        return db

    raise UnreadableInput(
        path or "<none>",
        "no PCI ID database found; set PCIDB_IDS or install hwdata",
    ) from last_err
