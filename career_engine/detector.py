import logging
from typing import List

from career_engine.taxonomy import SKILL_KEYWORDS

logger = logging.getLogger(__name__)


def detect_skills(text: str) -> List[str]:
    """Skills whose keywords occur anywhere in ``text``.

    Matching is plain substring containment on the lower-cased text, with no
    tokenisation or word boundaries, so short keywords such as ``"ml"`` also
    hit inside longer words ("html"). Result follows the keyword table's
    declaration order and has no duplicates.
    """
    low = (text or "").lower()
    found = [skill for skill, keywords in SKILL_KEYWORDS.items()
             if any(kw.lower() in low for kw in keywords)]
    logger.debug("detected %d skills in %d chars: %s", len(found), len(low), found)
    return found
