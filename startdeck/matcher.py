#===============================================================================
#  Startdeck | matcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-11
#  Last Update : 2026-02-14
#
#  Summary
#  -------
#  Fuzzy scoring of a search string against an entry name.
#  Every query character must appear in order (subsequence, checked with
#  rapidfuzz LCSseq). Scores fall in prefix > contiguous > scattered tiers;
#  scattered matches are ranked by the tightest window that holds the query.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Optional

from rapidfuzz.distance import LCSseq

TIER_SIZE = 1000
TIER_SCATTERED = 0
TIER_CONTIGUOUS = TIER_SIZE
TIER_PREFIX = 2 * TIER_SIZE

BOUNDARY_BONUS = 8

# One extra gap always costs more than every boundary bonus a scattered
# alignment can collect.
GAP_WEIGHT = 16
MAX_BOUNDARIES = GAP_WEIGHT - 1
MAX_GAPS = (TIER_SIZE - 1 - MAX_BOUNDARIES) // GAP_WEIGHT

WORD_SEPARATORS = set(" -_.&()[]/\\")


def is_subsequence(candidate: str, query: str) -> bool:
    return LCSseq.similarity(query, candidate) == len(query)


def _align_backward(candidate: str, query: str, end: int) -> Optional[List[int]]:
    """Latest positions of query in candidate[:end + 1], last char at `end`."""
    positions: List[int] = []
    idx = end
    for ch in reversed(query):
        idx = candidate.rfind(ch, 0, idx + 1)
        if idx < 0:
            return None
        positions.append(idx)
        idx -= 1
    positions.reverse()
    return positions


def tightest_alignment(candidate: str, query: str) -> Optional[List[int]]:
    """Positions of query in candidate spanning the smallest window.

    Both strings are expected to be lowercased already. Each place the last
    query char occurs is tried as the window end; ties keep the leftmost.
    Returns None when query is not a subsequence of candidate.
    """
    if not query:
        return []
    best: Optional[List[int]] = None
    last = query[-1]
    for end, ch in enumerate(candidate):
        if ch != last:
            continue
        positions = _align_backward(candidate, query, end)
        if positions is None:
            continue
        if best is None or positions[-1] - positions[0] < best[-1] - best[0]:
            best = positions
    return best


def _is_boundary(text: str, idx: int) -> bool:
    return idx == 0 or text[idx - 1] in WORD_SEPARATORS


def _substring_starts(hay: str, needle: str) -> List[int]:
    starts = []
    idx = hay.find(needle)
    while idx >= 0:
        starts.append(idx)
        idx = hay.find(needle, idx + 1)
    return starts


def fuzzy_score(candidate: str, query: str) -> Optional[int]:
    """Score how well query matches candidate; None means "no match"."""
    hay = (candidate or "").lower()
    needle = (query or "").lower()
    if not needle:
        return 0
    if not is_subsequence(hay, needle):
        return None

    starts = _substring_starts(hay, needle)
    if starts and starts[0] == 0:
        return TIER_PREFIX
    if starts:
        at_boundary = any(_is_boundary(hay, s) for s in starts)
        return TIER_CONTIGUOUS + (BOUNDARY_BONUS if at_boundary else 0)

    positions = tightest_alignment(hay, needle)
    if positions is None:
        return None
    gaps = positions[-1] - positions[0] + 1 - len(needle)
    boundaries = sum(1 for p in positions if _is_boundary(hay, p))
    inner = (TIER_SIZE - 1) - GAP_WEIGHT * min(gaps, MAX_GAPS) + min(boundaries, MAX_BOUNDARIES)
    return TIER_SCATTERED + inner
