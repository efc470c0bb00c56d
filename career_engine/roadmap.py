"""Education and startup roadmaps.

Education roadmaps are looked up by career title only. Startup ideas come
from a first-match chain over interests and hobbies.
"""
from types import MappingProxyType
from typing import AbstractSet, Optional

from career_engine.models import EducationLevel, EducationRoadmap, StartupRoadmap


def _edu(stream, ug_path, pg_options, roles, t10, t12, ug, pg, job):
    return EducationRoadmap(
        stream=stream,
        ug_path=ug_path,
        pg_options=pg_options,
        ideal_job_roles=roles,
        timeline={"10th": t10, "12th": t12, "UG": ug, "PG": pg, "Job": job},
    )


EDUCATION_ROADMAPS = MappingProxyType({
    "Software Engineer": _edu(
        "Science (with Computer Science)",
        "B.E./B.Tech in Computer Science or IT",
        ["M.Tech in Computer Science", "MS in Software Engineering", "MBA (optional)"],
        ["Software Developer", "Full Stack Engineer", "Backend Developer", "Frontend Developer", "DevOps Engineer"],
        "Focus on Mathematics, Science. Score well in board exams.",
        "Choose Science stream with PCM. Prepare for engineering entrance exams (JEE, CET).",
        "Complete B.E./B.Tech. Learn programming languages, build projects, do internships.",
        "Optional: Pursue M.Tech or MS. Gain specialization. Or join industry directly.",
        "Start as Software Engineer → Senior Engineer → Tech Lead → Engineering Manager",
    ),
    "AI Engineer": _edu(
        "Science (with Mathematics)",
        "B.E./B.Tech in Computer Science or Data Science",
        ["M.Tech in AI/ML", "MS in Artificial Intelligence", "PhD (for research)"],
        ["AI Engineer", "ML Engineer", "Data Scientist", "Research Scientist", "AI Consultant"],
        "Strong foundation in Mathematics and Science.",
        "Science stream with PCM. Excellent math scores.",
        "B.Tech in CS/DS. Learn Python, Statistics, ML basics. Build AI projects.",
        "M.Tech/MS in AI/ML. Research papers. Internships at AI companies.",
        "AI Engineer → Senior AI Engineer → Principal AI Engineer → AI Architect",
    ),
    "UI/UX Designer": _edu(
        "Arts or Science",
        "B.Des in UI/UX or B.E./B.Tech + Design courses",
        ["M.Des in Interaction Design", "MS in Human-Computer Interaction"],
        ["UI Designer", "UX Designer", "Product Designer", "Design Lead", "UX Researcher"],
        "Develop creative and analytical thinking.",
        "Any stream. Build portfolio with design projects.",
        "B.Des or B.Tech + design courses. Master Figma, learn user research.",
        "Optional: M.Des in Interaction Design. Build strong portfolio.",
        "Junior Designer → Designer → Senior Designer → Design Lead",
    ),
    "Graphic Designer": _edu(
        "Arts",
        "B.F.A. (Bachelor of Fine Arts) or B.Des in Graphic Design",
        ["M.F.A. in Graphic Design", "M.Des in Visual Communication"],
        ["Graphic Designer", "Visual Designer", "Brand Designer", "Creative Director"],
        "Focus on arts and creative subjects.",
        "Arts stream. Build basic design skills and portfolio.",
        "B.F.A. or B.Des. Master Adobe Creative Suite. Build portfolio.",
        "Optional: M.F.A. or M.Des. Gain specialization.",
        "Junior Graphic Designer → Graphic Designer → Senior Designer → Creative Director",
    ),
    "Marketing Manager": _edu(
        "Commerce or Arts",
        "BBA in Marketing or BA in Marketing/Business",
        ["MBA in Marketing", "M.Com with Marketing specialization"],
        ["Marketing Executive", "Marketing Manager", "Brand Manager", "Marketing Director"],
        "Develop communication and analytical skills.",
        "Commerce or Arts. Participate in marketing events.",
        "BBA/BA in Marketing. Learn digital marketing. Do internships.",
        "MBA in Marketing. Gain industry exposure. Build network.",
        "Marketing Executive → Marketing Manager → Senior Manager → Marketing Director",
    ),
    "HR Manager": _edu(
        "Commerce or Arts",
        "BBA in HR or BA in Psychology/Human Resources",
        ["MBA in HR", "MA in Organizational Psychology"],
        ["HR Executive", "HR Manager", "Talent Acquisition Manager", "HR Director"],
        "Develop people skills and communication.",
        "Commerce or Arts. Psychology is helpful.",
        "BBA/BA in HR or Psychology. Learn recruitment processes.",
        "MBA in HR. Gain industry experience through internships.",
        "HR Executive → HR Manager → Senior HR Manager → HR Director",
    ),
    "Business Analyst": _edu(
        "Commerce or Science",
        "BBA or B.Com or B.E./B.Tech",
        ["MBA", "MS in Business Analytics"],
        ["Business Analyst", "Data Analyst", "Business Consultant", "Product Manager"],
        "Strong analytical and problem-solving skills.",
        "Commerce or Science. Develop Excel and analytical skills.",
        "BBA/B.Com/B.Tech. Learn data analysis tools. Do internships.",
        "MBA or MS in Business Analytics. Gain domain expertise.",
        "Junior Business Analyst → Business Analyst → Senior Analyst → Principal Analyst",
    ),
    "Doctor": _edu(
        "Science (with Biology)",
        "MBBS (Bachelor of Medicine and Bachelor of Surgery)",
        ["MD/MS (Specialization)", "DM/MCh (Super-specialization)"],
        ["General Practitioner", "Specialist Doctor", "Surgeon", "Medical Researcher"],
        "Excellent scores in Science, especially Biology and Chemistry.",
        "Science with PCB. Prepare for NEET. High scores required.",
        "MBBS (5.5 years). Clinical rotations. Complete internship.",
        "MD/MS (3 years) for specialization. Or start practice after MBBS.",
        "Junior Doctor → Resident Doctor → Specialist → Senior Consultant",
    ),
    "Biomedical Researcher": _edu(
        "Science (with Biology)",
        "B.Sc in Biology/Biotechnology or B.E. in Biomedical Engineering",
        ["M.Sc in Biomedical Sciences", "PhD in Biomedical Research"],
        ["Research Scientist", "Biomedical Engineer", "Research Associate", "Lab Manager"],
        "Strong interest in Biology and Chemistry.",
        "Science with PCB. Prepare for entrance exams.",
        "B.Sc/B.E. in Biomedical. Learn lab techniques. Do research internships.",
        "M.Sc in Biomedical. Pursue PhD for advanced research.",
        "Research Associate → Research Scientist → Senior Scientist → Principal Researcher",
    ),
    "Educator": _edu(
        "Any (based on subject)",
        "BA/B.Sc/B.Com + B.Ed",
        ["MA/M.Sc/M.Com", "M.Ed", "PhD (for higher education)"],
        ["School Teacher", "College Professor", "Educational Consultant", "Curriculum Developer"],
        "Strong grasp of subjects you want to teach.",
        "Choose stream based on teaching subject. High scores.",
        "BA/B.Sc/B.Com in chosen subject. Develop communication skills.",
        "B.Ed + MA/M.Sc. Gain teaching certification.",
        "Assistant Teacher → Teacher → Senior Teacher → Principal/Professor",
    ),
    "Financial Analyst": _edu(
        "Commerce",
        "B.Com or BBA in Finance",
        ["MBA in Finance", "M.Com", "CFA certification"],
        ["Financial Analyst", "Investment Analyst", "Financial Consultant", "Finance Manager"],
        "Strong mathematical and analytical abilities.",
        "Commerce stream. Excellent scores in Accounts and Mathematics.",
        "B.Com/BBA in Finance. Learn Excel, accounting software.",
        "MBA in Finance or M.Com. Pursue CFA certification.",
        "Junior Financial Analyst → Financial Analyst → Senior Analyst → Finance Manager",
    ),
})

FALLBACK_ROADMAP = _edu(
    "Based on career choice",
    "Relevant undergraduate degree",
    ["Relevant postgraduate degree"],
    ["Entry-level role", "Mid-level role", "Senior role"],
    "Focus on core subjects",
    "Choose relevant stream",
    "Complete degree",
    "Optional postgraduate",
    "Start career",
)


def education_roadmap(career_title: str, level: Optional[EducationLevel] = None) -> EducationRoadmap:
    # level does not change the template; roadmaps are keyed by title only
    roadmap = EDUCATION_ROADMAPS.get(career_title, FALLBACK_ROADMAP)
    return roadmap.model_copy(deep=True)


def _startup(idea, why, skills, m12, m34, m56, money):
    return StartupRoadmap(
        idea=idea,
        why_suitable=why,
        required_skills=skills,
        roadmap={"Month 1-2": m12, "Month 3-4": m34, "Month 5-6": m56},
        monetization=money,
    )


EDTECH_IDEA = _startup(
    "EdTech Platform for Coding Bootcamps",
    "Your tech skills combined with business interest make you ideal for building an educational tech startup that solves the coding skill gap.",
    ["Programming", "Business Strategy", "Marketing", "Product Development"],
    "Validate idea, build MVP with basic features",
    "Launch beta, get initial users, gather feedback",
    "Scale platform, add advanced features, monetize",
    "Subscription model ($29-99/month), corporate training programs, certification fees",
)

DESIGN_MARKETPLACE_IDEA = _startup(
    "Custom Design Marketplace for Small Businesses",
    "Your design skills and business acumen make you perfect for connecting designers with businesses needing affordable design solutions.",
    ["Design Thinking", "Digital Marketing", "Business Development", "E-commerce Platform"],
    "Build platform MVP, onboard initial designers",
    "Launch marketplace, acquire first business customers",
    "Scale both sides, implement payment system, build brand",
    "Commission (15-20% per project), subscription for businesses ($49-199/month)",
)

DEFAULT_IDEA = _startup(
    "Personalized Learning Platform",
    "Your diverse interests and skills make you ideal for building a platform that offers personalized learning paths for various skills.",
    ["Product Development", "Content Creation", "Marketing", "Technology"],
    "Identify niche, build MVP with basic courses",
    "Launch beta, acquire initial learners, iterate",
    "Expand course library, implement monetization, scale marketing",
    "Course sales ($19-99 per course), subscription model ($29-79/month), corporate training",
)


def startup_idea(interests: AbstractSet[str], hobbies: AbstractSet[str]) -> StartupRoadmap:
    """Single startup idea; the first matching branch wins."""
    if ("Tech" in interests or "Coding" in hobbies) and "Business" in interests:
        idea = EDTECH_IDEA
    elif "Design" in interests and "Business" in interests:
        idea = DESIGN_MARKETPLACE_IDEA
    else:
        idea = DEFAULT_IDEA
    return idea.model_copy(deep=True)
