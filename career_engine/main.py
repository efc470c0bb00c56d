import logging
from typing import List

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import ORJSONResponse, RedirectResponse, Response

from career_engine.config import get_settings
from career_engine.detector import detect_skills
from career_engine.extract import InputDecodingError, extract_resume_text, make_preview
from career_engine.models import (
    EducationRoadmap, QuizAnswer, QuizReport, ResumeReport, Skill, StartupRequest,
    StartupRoadmap, TextPayload, parse_level,
)
from career_engine.report import build_quiz_report, build_resume_report, saved_report_payload
from career_engine.roadmap import education_roadmap, startup_idea
from career_engine.taxonomy import get_skill

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Career Guidance Engine",
    description="Answer a short quiz or upload a resume and get career suggestions, a skill-gap breakdown, an education roadmap and a startup idea. PDF and TXT resumes are supported.",
    version="0.1.0",
    openapi_tags=[
        {"name": "health", "description": "Service health check"},
        {"name": "quiz", "description": "Quiz based career recommendations"},
        {"name": "resume", "description": "Resume based career suggestion"},
        {"name": "roadmap", "description": "Education and startup roadmaps"},
    ],
    docs_url=None,
    redoc_url=None,
    default_response_class=ORJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/docs", include_in_schema=False)
async def custom_swagger_ui_html():
    return get_swagger_ui_html(
        openapi_url=app.openapi_url,
        title=app.title + " - Docs",
    )


@app.get("/", include_in_schema=False)
def root_redirect():
    return RedirectResponse(url="/docs", status_code=307)


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)


@app.get("/health", tags=["health"], summary="Service health check")
def health():
    return {"status": "ok"}


@app.post("/recommend", tags=["quiz"], summary="Career suggestions from quiz answers", response_model=QuizReport)
def recommend(answers: QuizAnswer):
    report = build_quiz_report(answers)
    logger.info("recommend level=%s -> %s", answers.level.value, [s.title for s in report.suggestions])
    return report


@app.post("/report/payload", tags=["quiz"], summary="Report blob for the report store")
def report_payload(answers: QuizAnswer):
    return saved_report_payload(build_quiz_report(answers))


@app.post(
    "/resume/upload",
    tags=["resume"],
    summary="Upload a resume and get a career suggestion",
    responses={
        400: {"description": "Unreadable file or unsupported format"},
        413: {"description": "File too large"},
    },
)
async def resume_upload(file: UploadFile = File(...)):
    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.max_upload_bytes} bytes.")
    try:
        content = extract_resume_text(file.filename, raw)
    except InputDecodingError as e:
        logger.warning("could not decode %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    report = build_resume_report(content)
    logger.info("resume %s -> %s", file.filename, report.career_title)
    return {
        "filename": file.filename,
        "chars": len(content),
        "preview": make_preview(content, settings.preview_chars),
        "report": report.model_dump(),
    }


@app.post("/resume/text", tags=["resume"], summary="Career suggestion from resume text", response_model=ResumeReport)
def resume_text(payload: TextPayload):
    return build_resume_report(payload.text)


@app.post("/skills/detect", tags=["resume"], summary="Detect skills in resume text")
def skills_detect(payload: TextPayload):
    skills: List[str] = detect_skills(payload.text)
    return {"skills": skills, "count": len(skills)}


@app.get("/roadmap/education", tags=["roadmap"], summary="Education roadmap for a career", response_model=EducationRoadmap)
def roadmap_education(title: str = Query(...), level: str = Query("Other")):
    return education_roadmap(title, parse_level(level))


@app.post("/roadmap/startup", tags=["roadmap"], summary="Startup idea from interests and hobbies", response_model=StartupRoadmap)
def roadmap_startup(payload: StartupRequest):
    return startup_idea(set(payload.interests), set(payload.hobbies))


@app.get("/skills/resources", tags=["resume"], summary="Learning resources for a skill", response_model=Skill)
def skills_resources(name: str = Query(...)):
    return get_skill(name)
