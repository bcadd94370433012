import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    CoverLetterRequest,
    CVEmbedRequest,
    InterviewQuestionsRequest,
    SemanticRankRequest,
    SkillCompareRequest,
    SkillExtractRequest,
    TailoredCVRequest,
)
from models.responses import (
    CoverLetterResponse,
    CVEmbedResponse,
    InterviewQuestionsResponse,
    SemanticRankResponse,
    SkillExtractResponse,
    TailoredCVResponse,
)
from models.schemas.parsed_cv import ParsedCV
from models.schemas.skills_comparison import SkillComparison
from services import (
    cv_parser,
    gemini_client,
    generation,
    pdf_parser,
    semantic_rank,
    skills,
    vector_store,
)

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "vector_store_configured": bool(settings.qdrant_url),
    }


@router.post("/skills/compare", response_model=SkillComparison)
@limiter.limit(settings.rate_limit)
async def compare_skills(request: Request, body: SkillCompareRequest):
    required = body.required_skills
    if required is None:
        required = skills.get_job_skills(body.gap_analysis, body.description)
    return skills.compare_skills(body.cv_skills, required)


@router.post("/skills/extract", response_model=SkillExtractResponse)
@limiter.limit(settings.rate_limit)
async def extract_skills(request: Request, body: SkillExtractRequest):
    return SkillExtractResponse(skills=skills.extract_skills_from_description(body.description))


@router.post("/cv/parse", response_model=ParsedCV)
@limiter.limit(settings.rate_limit)
async def parse_cv(request: Request, cv_file: UploadFile = File(...)):
    content_type = cv_file.content_type or ""
    if content_type not in pdf_parser.SUPPORTED_TYPES:
        raise HTTPException(status_code=400, detail="Only PDF, Word (.docx) and plain text files are accepted")

    content = await cv_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = pdf_parser.extract_text_from_file(content, content_type)
    except Exception:
        logger.exception("Text extraction failed for %s", cv_file.filename)
        raise HTTPException(status_code=400, detail="Could not read CV file")

    if not text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from CV")

    parsed = await cv_parser.parse_cv(text)
    if parsed is None:
        raise HTTPException(status_code=502, detail="CV parsing is currently unavailable")
    return parsed


@router.post("/cv/embed", response_model=CVEmbedResponse)
@limiter.limit(settings.rate_limit)
async def embed_cv(request: Request, body: CVEmbedRequest):
    text = cv_parser.build_embedding_text(body.parsed_cv)
    if not text:
        raise HTTPException(status_code=400, detail="CV has no content to embed")

    try:
        embedding = await gemini_client.generate_embedding(text)
        await vector_store.upsert_cv_embedding(body.user_id, body.cv_id, embedding)
    except Exception:
        logger.exception("CV embed failed for cv %s", body.cv_id)
        raise HTTPException(status_code=500, detail="Failed to generate embedding")

    return CVEmbedResponse(cv_id=body.cv_id, embedding_dimensions=len(embedding))


@router.post("/jobs/semantic-rank", response_model=SemanticRankResponse)
@limiter.limit(settings.rate_limit)
async def rank_jobs(request: Request, body: SemanticRankRequest):
    return await semantic_rank.rank_matches(
        body.matches,
        user_id=body.user_id,
        cv_id=body.cv_id,
        query=body.query,
    )


@router.post("/cover-letter/generate", response_model=CoverLetterResponse)
@limiter.limit(settings.rate_limit)
async def generate_cover_letter(request: Request, body: CoverLetterRequest):
    letter = await generation.generate_cover_letter(body.job, body.parsed_cv, body.tone)
    if letter is None:
        logger.warning("Cover letter generation unavailable, serving template")
        return CoverLetterResponse(
            cover_letter=generation.mock_cover_letter(body.job, body.tone), degraded=True
        )
    return CoverLetterResponse(cover_letter=letter)


@router.post("/cv/generate", response_model=TailoredCVResponse)
@limiter.limit(settings.rate_limit)
async def generate_tailored_cv(request: Request, body: TailoredCVRequest):
    tailored = await generation.generate_tailored_cv(body.job, body.parsed_cv)
    if tailored is None:
        logger.warning("Tailored CV generation unavailable, serving template")
        return TailoredCVResponse(
            tailored_cv=generation.mock_tailored_cv(body.job, body.parsed_cv), degraded=True
        )
    return TailoredCVResponse(tailored_cv=tailored)


@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
@limiter.limit(settings.rate_limit)
async def interview_questions(request: Request, body: InterviewQuestionsRequest):
    questions = await generation.generate_interview_questions(body.job)
    if questions is None:
        logger.warning("Interview question generation unavailable, serving defaults")
        return InterviewQuestionsResponse(
            questions=generation.mock_interview_questions(body.job), degraded=True
        )
    return InterviewQuestionsResponse(questions=questions)
