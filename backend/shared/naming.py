"""Sprite name helpers: keep display names unique across one library refresh."""

from typing import Any, Dict, List, Set


def find_unique_name(name: str, names: Set[str]) -> str:
    """
    Given a name and the set of names already taken, return the name itself if free,
    otherwise a variant obtained by bumping/appending digits.

    A trailing digit below '9' is replaced by 1, 2, ... (at most 9 tries per run);
    once the run is exhausted, '0' is appended after a digit and ' 1' after anything else.
    E.g. 'sprite1' -> 'sprite2', 'sprite9' -> 'sprite90', 'cat' -> 'cat 1'.
    """
    candidate = name
    i = 1
    while candidate in names:
        last = candidate[-1:]
        if "0" <= last < "9" and i < 10:
            candidate = candidate[:-1] + str(i)
            i += 1
        else:
            i = 1
            suffix = "0" if "0" <= last <= "9" else " 1"
            candidate = f"{candidate}{suffix}"
    return candidate


def dedupe_display_names(descriptors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Rewrite display_name of each descriptor in place so that all names are pairwise distinct.
    Earlier descriptors keep their name; the embedded sprite metadata is renamed too.
    """
    names: Set[str] = set()
    for d in descriptors:
        candidate = find_unique_name(d.get("display_name") or "", names)
        d["display_name"] = candidate
        metadata = d.get("metadata")
        if isinstance(metadata, dict):
            metadata["name"] = candidate
            metadata["objName"] = candidate
        names.add(candidate)
    return descriptors
