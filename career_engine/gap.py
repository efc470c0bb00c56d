from typing import AbstractSet, FrozenSet, Sequence

from career_engine.models import QuizAnswer, SkillGapResult
from career_engine.taxonomy import TAG_SKILLS


def known_skills(answers: QuizAnswer) -> FrozenSet[str]:
    """Skills implied by the user's subjects, interests and hobbies.

    Tags missing from the lookup table contribute nothing.
    """
    skills = set()
    for tag in answers.tags():
        skills.update(TAG_SKILLS.get(tag, ()))
    return frozenset(skills)


def analyze_gap(known: AbstractSet[str], required: Sequence[str]) -> SkillGapResult:
    has = [s for s in required if s in known]
    needs = [s for s in required if s not in known]
    return SkillGapResult(
        skills_user_has=has,
        skills_to_learn=needs,
        total_required=len(required),
        already_have=len(has),
        need_to_learn=len(needs),
    )
