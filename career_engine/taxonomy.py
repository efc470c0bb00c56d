"""Static skill tables shared by the recommendation engine.

Everything here is built once at import time and exposed read-only, so the
tables can be shared by concurrent requests without locking.
"""
from types import MappingProxyType
from urllib.parse import quote, quote_plus

from career_engine.models import Course, Skill


def _frozen(table):
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


def _search(q: str) -> str:
    return "https://www.google.com/search?q=" + quote_plus(q)


# skill -> learning resource (quiz results page)
SKILL_RESOURCE_LINKS = MappingProxyType({
    "Python": _search("learn python for beginners"),
    "Machine Learning": _search("machine learning course for beginners"),
    "Data Science": _search("data science course for beginners"),
    "Neural Networks": _search("neural networks basics course"),
    "Programming": _search("programming for beginners"),
    "Problem Solving": _search("improve problem solving skills"),
    "Data Structures": _search("data structures and algorithms course"),
    "Algorithms": _search("algorithms course for beginners"),
    "Design Thinking": _search("design thinking course"),
    "Figma": _search("learn figma ui design"),
    "User Research": _search("user research ux course"),
    "Prototyping": _search("ui ux prototyping course"),
    "Adobe Creative Suite": _search("learn adobe creative suite"),
    "Typography": _search("typography basics"),
    "Color Theory": _search("color theory for designers"),
    "Layout Design": _search("layout design principles"),
    "Digital Marketing": _search("digital marketing course for beginners"),
    "Communication": _search("improve communication skills"),
    "Analytics": _search("marketing analytics course"),
    "Strategy": _search("business strategy basics"),
    "People Management": _search("people management skills"),
    "Recruitment": _search("recruitment training course"),
    "Organizational Psychology": _search("organizational psychology basics"),
    "Biology": _search("learn biology online"),
    "Chemistry": _search("basic chemistry course"),
    "Critical Thinking": _search("critical thinking skills"),
    "Empathy": _search("how to develop empathy"),
    "Research Methods": _search("research methods course"),
    "Laboratory Skills": _search("basic laboratory skills"),
    "Data Analysis": _search("data analysis course"),
    "Scientific Writing": _search("scientific writing course"),
    "Research Methodology": _search("research methodology course"),
    "Pedagogy": _search("pedagogy course for teachers"),
    "Subject Expertise": _search("become expert in subject"),
    "Patience": _search("how to develop patience"),
    "Financial Analysis": _search("financial analysis course"),
    "Accounting": _search("basic accounting course"),
    "Excel": _search("learn excel for beginners"),
    "Market Analysis": _search("market analysis course"),
    "Leadership": _search("leadership skills course"),
    "Time Management": _search("time management course"),
    "Team Leadership": _search("team leadership skills"),
    "Business Strategy": _search("business strategy course"),
    "Financial Modeling": _search("financial modelling course"),
    "Market Research": _search("market research course"),
})


def skill_link(skill: str) -> str:
    if skill in SKILL_RESOURCE_LINKS:
        return SKILL_RESOURCE_LINKS[skill]
    return _search(skill + " course for beginners")


def learning_links(skill: str) -> dict:
    """Search locators on the free/paid platforms the results page links to."""
    q = quote(skill, safe="")
    return {
        "nptel": f"https://nptel.ac.in/courses/search?q={q}",
        "youtube": f"https://www.youtube.com/results?search_query={q}+course+for+beginners",
        "coursera": f"https://www.coursera.org/search?query={q}",
        "udemy": f"https://www.udemy.com/courses/search/?q={q}",
    }


def get_skill(name: str) -> Skill:
    return Skill(name=name, links=[skill_link(name), *learning_links(name).values()])


# quiz tag -> skills the user plausibly has already
TAG_SKILLS = _frozen({
    "Math": ["Problem Solving", "Data Analysis", "Algorithms"],
    "Science": ["Research Methods", "Data Analysis", "Critical Thinking"],
    "Biology": ["Biology", "Research Methods", "Laboratory Skills"],
    "Commerce": ["Financial Analysis", "Accounting", "Market Analysis"],
    "Arts": ["Design Thinking", "Typography", "Color Theory"],
    "Computers": ["Programming", "Data Structures", "Algorithms"],
    "Tech": ["Programming", "Problem Solving", "Data Structures"],
    "Design": ["Design Thinking", "Typography", "Color Theory"],
    "Business": ["Business Strategy", "Market Research", "Leadership"],
    "Research": ["Research Methods", "Data Analysis", "Critical Thinking"],
    "Coding": ["Programming", "Data Structures", "Algorithms"],
    "Drawing": ["Design Thinking", "Color Theory", "Layout Design"],
})

# resume keyword table; matching is plain substring containment on lower-cased text
SKILL_KEYWORDS = _frozen({
    "Python": ["python"],
    "Machine Learning": ["machine learning", "ml", "scikit-learn"],
    "Data Science": ["data science", "data scientist", "pandas", "numpy"],
    "SQL": ["sql", "mysql", "postgresql", "postgres"],
    "Statistics": ["statistics", "probability", "statistical"],
    "HTML": ["html"],
    "CSS": ["css"],
    "JavaScript": ["javascript", "js", "react", "next.js", "node.js"],
    "React": ["react", "next.js"],
    "UI/UX Design": ["ui/ux", "ux", "ui", "wireframe", "prototype", "user research"],
    "Figma": ["figma"],
    "Java": ["java"],
    "C Programming": [" c ", "c programmer", "c programming"],
    "Communication": ["communication", "presentation", "public speaking"],
    "Leadership": ["leader", "lead", "team lead", "leadership"],
})

# career title -> required skills, in display order
CAREER_SKILLS = _frozen({
    "AI Engineer": ["Python", "Machine Learning", "Data Science", "Neural Networks"],
    "Software Engineer": ["Programming", "Problem Solving", "Data Structures", "Algorithms"],
    "UI/UX Designer": ["Design Thinking", "Figma", "User Research", "Prototyping"],
    "Graphic Designer": ["Adobe Creative Suite", "Typography", "Color Theory", "Layout Design"],
    "Marketing Manager": ["Digital Marketing", "Communication", "Analytics", "Strategy"],
    "HR Manager": ["People Management", "Recruitment", "Organizational Psychology", "Communication"],
    "Business Analyst": ["Data Analysis", "Business Strategy", "Financial Modeling", "Market Research"],
    "Doctor": ["Biology", "Chemistry", "Critical Thinking", "Empathy"],
    "Biomedical Researcher": ["Research Methods", "Laboratory Skills", "Data Analysis", "Scientific Writing"],
    "Research Scientist": ["Research Methodology", "Data Analysis", "Critical Thinking", "Scientific Writing"],
    "Educator": ["Communication", "Pedagogy", "Subject Expertise", "Patience"],
    "Financial Analyst": ["Financial Analysis", "Accounting", "Excel", "Market Analysis"],
    "General Manager": ["Leadership", "Communication", "Problem Solving", "Strategic Thinking"],
    "Project Manager": ["Organization", "Communication", "Time Management", "Team Leadership"],
})


def _courses(*entries):
    return tuple(Course(**e) for e in entries)


# skill -> courses suggested when the skill is missing from a resume
COURSE_RESOURCES = MappingProxyType({
    "Python": _courses(
        {"title": "Python for Everybody", "platform": "Coursera",
         "link": _search("python for everybody coursera"), "note": "Beginner-friendly Python course."},
        {"title": "NPTEL – Programming, Data Structures and Algorithms using Python", "platform": "NPTEL",
         "link": _search("nptel python course")},
    ),
    "Machine Learning": _courses(
        {"title": "NPTEL – Introduction to Machine Learning", "platform": "NPTEL",
         "link": _search("nptel introduction to machine learning")},
        {"title": "Machine Learning Crash Course", "platform": "Google / YouTube",
         "link": _search("google machine learning crash course")},
    ),
    "Data Science": _courses(
        {"title": "IBM Data Science Professional Certificate", "platform": "Coursera",
         "link": _search("ibm data science professional certificate")},
    ),
    "SQL": _courses(
        {"title": "SQL for Data Science", "platform": "Coursera",
         "link": _search("sql for data science coursera")},
    ),
    "Statistics": _courses(
        {"title": "NPTEL – Probability and Statistics", "platform": "NPTEL",
         "link": _search("nptel probability and statistics")},
    ),
    "HTML": _courses(
        {"title": "HTML Full Course", "platform": "YouTube",
         "link": _search("html full course youtube")},
    ),
    "CSS": _courses(
        {"title": "Modern CSS Course", "platform": "YouTube / Udemy",
         "link": _search("css course for beginners")},
    ),
    "JavaScript": _courses(
        {"title": "JavaScript for Beginners", "platform": "FreeCodeCamp / YouTube",
         "link": _search("javascript for beginners course")},
    ),
    "React": _courses(
        {"title": "React – The Complete Guide", "platform": "Udemy",
         "link": _search("react the complete guide udemy")},
    ),
    "UI/UX Design": _courses(
        {"title": "UI/UX Design Specialization", "platform": "Coursera",
         "link": _search("ui ux design course coursera")},
    ),
    "Figma": _courses(
        {"title": "Figma UI Design Tutorial", "platform": "YouTube",
         "link": _search("figma ui design tutorial")},
    ),
    "Communication": _courses(
        {"title": "Improve Your Communication Skills", "platform": "Coursera / YouTube",
         "link": _search("improve communication skills course")},
    ),
    "Leadership": _courses(
        {"title": "Leadership Skills Development", "platform": "Coursera / edX",
         "link": _search("leadership skills course")},
    ),
})
