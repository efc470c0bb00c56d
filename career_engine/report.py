import logging
from typing import Dict, List, Sequence

import orjson
from pydantic import BaseModel

from career_engine.classifier import classify
from career_engine.detector import detect_skills
from career_engine.gap import analyze_gap, known_skills
from career_engine.models import (
    CareerSuggestion, Course, QuizAnswer, QuizReport, ResumeReport, StagedRoadmap,
)
from career_engine.roadmap import education_roadmap, startup_idea
from career_engine.taxonomy import COURSE_RESOURCES, skill_link

logger = logging.getLogger(__name__)


def build_report(answers: QuizAnswer) -> List[CareerSuggestion]:
    known = known_skills(answers)
    out = []
    for cand in classify(answers):
        out.append(CareerSuggestion(
            title=cand.title,
            why=cand.why,
            path=cand.path,
            skills=cand.skills,
            skill_links={s: skill_link(s) for s in cand.skills},
            roadmap=education_roadmap(cand.title, answers.level),
            skill_gap=analyze_gap(known, cand.skills),
        ))
    logger.debug("quiz report: %s", [s.title for s in out])
    return out


def build_quiz_report(answers: QuizAnswer) -> QuizReport:
    suggestions = build_report(answers)
    missing: Dict[str, None] = {}
    for s in suggestions:
        for skill in s.skill_gap.skills_to_learn:
            missing.setdefault(skill, None)
    return QuizReport(
        suggestions=suggestions,
        missing_skills=list(missing),
        startup_idea=startup_idea(answers.interests, answers.hobbies),
    )


class CareerTemplate(BaseModel):
    title: str
    match_skills: List[str]
    required_skills: List[str]
    fit_reason: str
    roadmap: StagedRoadmap


CAREER_TEMPLATES = (
    CareerTemplate(
        title="ML / Data Science Engineer",
        match_skills=["Python", "Machine Learning", "Data Science"],
        required_skills=["Python", "Machine Learning", "Data Science", "SQL", "Statistics"],
        fit_reason="Your resume mentions Python and data-related tools, which are a strong base for a career in Machine Learning / Data Science.",
        roadmap=StagedRoadmap(
            short_term=[
                "Strengthen Python fundamentals (functions, OOP, libraries).",
                "Learn basic statistics and probability.",
                "Complete an introductory data analysis course.",
            ],
            mid_term=[
                "Build 2–3 ML projects (classification, regression).",
                "Learn SQL and practice querying real datasets.",
                "Explore data visualization tools (Matplotlib / Power BI / Tableau).",
            ],
            long_term=[
                "Create a strong ML/Data Science portfolio on GitHub.",
                "Apply for internships / junior data roles.",
                "Learn advanced ML topics (NLP, deep learning) as you grow.",
            ],
        ),
    ),
    CareerTemplate(
        title="Frontend Web Developer",
        match_skills=["HTML", "CSS", "JavaScript", "React"],
        required_skills=["HTML", "CSS", "JavaScript", "React", "Git"],
        fit_reason="Your resume shows web technologies like HTML, CSS, JavaScript or React, which fit very well with a frontend developer role.",
        roadmap=StagedRoadmap(
            short_term=[
                "Master HTML & CSS basics (layouts, flexbox, grid).",
                "Finish a beginner JavaScript course.",
                "Build 1 simple static website (portfolio / landing page).",
            ],
            mid_term=[
                "Learn React fundamentals (components, props, state).",
                "Recreate 2–3 real websites using React.",
                "Learn Git & GitHub to manage your projects.",
            ],
            long_term=[
                "Build a polished portfolio website with multiple projects.",
                "Apply for frontend internships / junior developer roles.",
                "Learn Next.js and TypeScript for advanced roles.",
            ],
        ),
    ),
    CareerTemplate(
        title="UI/UX Designer",
        match_skills=["UI/UX Design", "Figma"],
        required_skills=["UI/UX Design", "Figma", "User Research", "Prototyping", "Communication"],
        fit_reason="Your resume includes design and UX-related keywords, which are ideal for a UI/UX design career.",
        roadmap=StagedRoadmap(
            short_term=[
                "Learn UI/UX basics (good vs bad design, design principles).",
                "Learn Figma and practice simple UI screens.",
                "Redesign a basic app or website as practice.",
            ],
            mid_term=[
                "Create 2–3 full app/web design case studies.",
                "Study user research basics (surveys, interviews).",
                "Learn about prototyping and user testing.",
            ],
            long_term=[
                "Build a strong design portfolio on Behance/Dribbble.",
                "Apply for design internships / freelance gigs.",
                "Collaborate with developers to see your designs go live.",
            ],
        ),
    ),
)

GENERAL_TEMPLATE = CareerTemplate(
    title="General Tech Career Explorer",
    match_skills=[],
    required_skills=["Programming", "Problem Solving", "Communication"],
    fit_reason="Your resume contains general academic/tech content but not enough clear skill keywords, so this path gives you a broad starting direction.",
    roadmap=StagedRoadmap(
        short_term=[
            "Pick one programming language (Python or JavaScript) and learn the basics.",
            "Solve simple coding problems daily.",
            "Improve general communication and presentation skills.",
        ],
        mid_term=[
            "Build 1–2 small projects in your chosen language.",
            "Join online communities / hackathons.",
            "Explore different domains like web dev, data, or app dev.",
        ],
        long_term=[
            "Choose one domain to go deep (web, data, app).",
            "Create a small but focused portfolio.",
            "Apply for internships / entry-level roles in that domain.",
        ],
    ),
)


def choose_template(detected: Sequence[str]) -> CareerTemplate:
    """Template with the most matching skills; ties keep the earlier one."""
    best, best_score = GENERAL_TEMPLATE, 0
    for tpl in CAREER_TEMPLATES:
        score = sum(1 for s in tpl.match_skills if s in detected)
        if score > best_score:
            best, best_score = tpl, score
    logger.debug("template %r scored %d", best.title, best_score)
    return best


def build_course_list(missing_skills: Sequence[str]) -> List[Course]:
    courses: List[Course] = []
    seen = set()
    for skill in missing_skills:
        for c in COURSE_RESOURCES.get(skill, ()):
            key = (c.title, c.platform)
            if key in seen:
                continue
            seen.add(key)
            courses.append(c)
    return courses


def build_resume_report(resume_text: str) -> ResumeReport:
    detected = detect_skills(resume_text)
    tpl = choose_template(detected)
    missing = [s for s in tpl.required_skills if s not in detected]
    return ResumeReport(
        career_title=tpl.title,
        fit_reason=tpl.fit_reason,
        required_skills=list(tpl.required_skills),
        detected_skills=detected,
        missing_skills=missing,
        roadmap=tpl.roadmap.model_copy(deep=True),
        course_recommendations=build_course_list(missing),
    )


def saved_report_payload(report: QuizReport) -> dict:
    """Write-once blob handed to the report store."""
    return {
        "suggestions": [s.model_dump() for s in report.suggestions],
        "missing_skills": list(report.missing_skills),
        "startup_idea": report.startup_idea.model_dump() if report.startup_idea else None,
    }


def serialize_report(report: QuizReport) -> bytes:
    return orjson.dumps(saved_report_payload(report))
