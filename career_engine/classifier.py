"""Rule-based career classifier.

Each rule looks at the quiz answers (and at what earlier rules produced) and
returns zero or more career titles. Rules run in declaration order and their
outputs are concatenated, so the order of ``RULES`` is the order of the
suggestions shown to the user.
"""
import logging
from typing import Callable, Iterable, List, Sequence, Tuple

from pydantic import BaseModel

from career_engine.models import EducationLevel, QuizAnswer
from career_engine.taxonomy import CAREER_SKILLS

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 4

CAREER_RATIONALE = {
    "AI Engineer": "Your passion for technology, mathematics, and research makes you a perfect fit for the cutting-edge field of AI engineering.",
    "Software Engineer": "Your interest in tech and math, combined with your coding hobby, aligns perfectly with software engineering.",
    "UI/UX Designer": "Your combination of design interest and tech knowledge makes you ideal for creating user-friendly digital experiences.",
    "Graphic Designer": "Your creative interests and artistic skills are perfect for visual communication and branding.",
    "Marketing Manager": "Your business acumen, people skills, and communication abilities are ideal for marketing and brand management.",
    "HR Manager": "Your interest in business and people makes you well-suited for human resources and talent management.",
    "Business Analyst": "Your business interest combined with analytical thinking positions you well for business strategy and analysis.",
    "Doctor": "Your strong foundation in science and biology, combined with your interest in helping people, makes medicine an excellent fit.",
    "Biomedical Researcher": "Your passion for science and biology, especially if combined with research interest, aligns with biomedical research.",
    "Research Scientist": "Your research interest and analytical mindset make you well-suited for scientific research and discovery.",
    "Educator": "Your passion for teaching and sharing knowledge makes education a rewarding career path for you.",
    "Financial Analyst": "Your commerce background and business interest position you well for finance and investment analysis.",
    "General Manager": "Your diverse interests and skills make you well-suited for management roles across various industries.",
    "Project Manager": "Your ability to balance multiple interests suggests you'd excel at coordinating and managing projects.",
}

LEVEL_PATHS = {
    EducationLevel.TENTH: "Complete 10th → Choose Science/Commerce/Arts in PUC → Pursue relevant degree → Specialize in your chosen field",
    EducationLevel.PUC: "Complete PUC → Choose relevant degree program → Gain internships → Build portfolio → Enter workforce or pursue higher studies",
    EducationLevel.DEGREE: "Complete your degree → Gain industry experience through internships → Build specialized skills → Consider certifications → Advance in your career",
    EducationLevel.OTHER: "Assess your current skills → Identify learning gaps → Take relevant courses/certifications → Build portfolio → Network and apply for opportunities",
}


class CareerCandidate(BaseModel):
    title: str
    why: str
    path: str
    skills: List[str]


def path_for_level(level: EducationLevel) -> str:
    return LEVEL_PATHS[level]


Rule = Callable[[QuizAnswer, Sequence[str]], List[str]]


def _tech_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    tech = "Tech" in a.interests and ("Math" in a.subjects or "Computers" in a.subjects)
    if not (tech or "Coding" in a.hobbies):
        return []
    if "Research" in a.interests:
        return ["AI Engineer", "Software Engineer"]
    return ["Software Engineer"]


def _design_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    if not ("Design" in a.interests or "Drawing" in a.hobbies or "Arts" in a.subjects):
        return []
    if "Tech" in a.interests:
        return ["UI/UX Designer", "Graphic Designer"]
    return ["Graphic Designer"]


def _business_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    if "Business" not in a.interests:
        return []
    if "People" in a.interests:
        if "Speaking" in a.hobbies:
            return ["Marketing Manager", "HR Manager"]
        return ["HR Manager"]
    return ["Business Analyst"]


def _biology_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    if not ("Science" in a.subjects and "Biology" in a.subjects):
        return []
    if "People" in a.interests:
        return ["Doctor", "Biomedical Researcher"]
    return ["Biomedical Researcher"]


def _research_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    # only when nothing above matched
    if "Research" in a.interests and not so_far:
        return ["Research Scientist"]
    return []


def _teaching_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    return ["Educator"] if "Teaching" in a.interests else []


def _finance_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    if "Commerce" in a.subjects and "Business" in a.interests:
        return ["Financial Analyst"]
    return []


def _default_rule(a: QuizAnswer, so_far: Sequence[str]) -> List[str]:
    return [] if so_far else ["General Manager", "Project Manager"]


RULES: Tuple[Rule, ...] = (
    _tech_rule,
    _design_rule,
    _business_rule,
    _biology_rule,
    _research_rule,
    _teaching_rule,
    _finance_rule,
    _default_rule,
)


def classify_titles(answers: QuizAnswer) -> List[str]:
    titles: List[str] = []
    for rule in RULES:
        hit = rule(answers, tuple(titles))
        if hit:
            logger.debug("%s -> %s", rule.__name__, hit)
        titles.extend(hit)
    return titles[:MAX_SUGGESTIONS]


def classify(answers: QuizAnswer) -> List[CareerCandidate]:
    path = path_for_level(answers.level)
    return [
        CareerCandidate(
            title=title,
            why=CAREER_RATIONALE[title],
            path=path,
            skills=list(CAREER_SKILLS[title]),
        )
        for title in classify_titles(answers)
    ]


# resume skill -> (tag group, tag) it stands in for
RESUME_SKILL_TAGS = {
    "Python": ("hobbies", "Coding"),
    "JavaScript": ("hobbies", "Coding"),
    "Java": ("hobbies", "Coding"),
    "C Programming": ("hobbies", "Coding"),
    "Machine Learning": ("interests", "Research"),
    "Data Science": ("interests", "Research"),
    "Statistics": ("subjects", "Math"),
    "UI/UX Design": ("interests", "Design"),
    "Figma": ("interests", "Design"),
    "Communication": ("hobbies", "Speaking"),
    "Leadership": ("interests", "People"),
}


def answers_from_skills(skills: Iterable[str]) -> QuizAnswer:
    groups = {"subjects": set(), "interests": set(), "hobbies": set()}
    for skill in skills:
        if skill in RESUME_SKILL_TAGS:
            group, tag = RESUME_SKILL_TAGS[skill]
            groups[group].add(tag)
    return QuizAnswer(level=EducationLevel.OTHER, **groups)


def classify_resume_skills(skills: Iterable[str]) -> List[CareerCandidate]:
    """Run the quiz rules over skills detected in a resume."""
    return classify(answers_from_skills(skills))
