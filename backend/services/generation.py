"""Cover letter, tailored CV and interview question generation.

Each ``generate_*`` coroutine returns None when Gemini is unavailable or
answers with something unusable; the ``mock_*`` helpers supply the canned
content the API serves in that case.
"""

import logging

from pydantic import ValidationError

from models.requests import JobInfo
from models.schemas.generated import CoverLetter, InterviewQuestion, TailoredCV
from models.schemas.parsed_cv import ParsedCV
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

DEFAULT_MOCK_SKILLS = ("JavaScript", "TypeScript", "React")


def _title(job: JobInfo, default: str = "the position") -> str:
    return job.title or default


def _company(job: JobInfo, default: str = "the company") -> str:
    return job.company or default


async def generate_cover_letter(
    job: JobInfo, parsed_cv: ParsedCV | None = None, tone: str = "professional"
) -> CoverLetter | None:
    title, company = _title(job), _company(job)
    skills = ", ".join(parsed_cv.skills) if parsed_cv and parsed_cv.skills else "various technical skills"
    summary = parsed_cv.summary if parsed_cv else ""

    data = await gemini_client.generate_json(
        prompt_builder.build_cover_letter_prompt(title, company, skills, summary, tone, job.description),
        temperature=0.7,
    )
    if not isinstance(data, dict):
        return None

    return CoverLetter(
        subject=data.get("subject") or f"Application for {title} at {company}",
        body=data.get("body") or "",
        tone=data.get("tone") or tone,
    )


async def generate_tailored_cv(job: JobInfo, parsed_cv: ParsedCV | None = None) -> TailoredCV | None:
    title, company = _title(job), _company(job)
    skills = "various skills"
    experience = ""
    if parsed_cv:
        if parsed_cv.skills:
            skills = ", ".join(parsed_cv.skills)
        experience = "\n".join(
            f"{e.role} at {e.company} ({e.duration}): {e.description}" for e in parsed_cv.experience
        )

    data = await gemini_client.generate_json(
        prompt_builder.build_tailored_cv_prompt(title, company, skills, experience, job.description),
        temperature=0.5,
    )
    if not isinstance(data, dict):
        return None

    try:
        return TailoredCV(
            summary=data.get("summary") or "",
            skills=[str(s) for s in data.get("skills") or [] if s],
            experience=data.get("experience") or [],
            # 0 or missing both mean the model gave no usable estimate
            ats_score=data.get("ats_score") or data.get("atsScore") or 75,
        )
    except ValidationError as e:
        logger.error("Gemini tailored CV had unexpected shape: %s", e)
        return None


async def generate_interview_questions(job: JobInfo) -> list[InterviewQuestion] | None:
    """Five likely questions for the job. An answer without questions gives []."""
    data = await gemini_client.generate_json(
        prompt_builder.build_interview_questions_prompt(_title(job), _company(job), job.description),
        temperature=0.7,
    )
    if not isinstance(data, dict):
        return None

    try:
        return [InterviewQuestion.model_validate(q) for q in data.get("questions") or []]
    except ValidationError as e:
        logger.error("Gemini interview questions had unexpected shape: %s", e)
        return None


def mock_cover_letter(job: JobInfo, tone: str = "professional") -> CoverLetter:
    title, company = _title(job), _company(job, "your company")
    body = (
        "Dear Hiring Manager,\n\n"
        f"I am writing to express my strong interest in the {title} position at {company}. "
        "With my background in software development and passion for building exceptional products, "
        "I believe I would be a valuable addition to your team.\n\n"
        "Throughout my career, I have developed expertise in modern web technologies and have "
        "consistently delivered high-quality solutions. My experience aligns well with the "
        "requirements of this role, and I am excited about the opportunity to contribute to "
        f"{company}'s continued success.\n\n"
        "I would welcome the opportunity to discuss how my skills and experience can benefit "
        "your team. Thank you for considering my application.\n\n"
        "Best regards"
    )
    return CoverLetter(subject=f"Application for {title} at {company}", body=body, tone=tone)


def mock_tailored_cv(job: JobInfo, parsed_cv: ParsedCV | None = None) -> TailoredCV:
    cv_skills = list(parsed_cv.skills) if parsed_cv and parsed_cv.skills else list(DEFAULT_MOCK_SKILLS)
    return TailoredCV(
        summary=(
            f"Experienced professional tailored for {_title(job, 'this role')} at {_company(job)}. "
            f"Bringing strong expertise in {', '.join(cv_skills[:3])}."
        ),
        skills=cv_skills + ["Problem Solving", "Team Collaboration"],
        experience=[{
            "role": "Senior Developer",
            "company": "Previous Company",
            "duration": "3 years",
            "highlights": [
                "Led development of key features",
                "Improved performance by 40%",
                "Mentored junior developers",
            ],
        }],
        ats_score=87,
    )


def mock_interview_questions(job: JobInfo) -> list[InterviewQuestion]:
    title, company = _title(job, "this role"), _company(job)
    return [
        InterviewQuestion(
            question="Tell me about a time you faced a significant challenge in a previous role and how you overcame it.",
            type="behavioral",
            guidance="Use the STAR method: Situation, Task, Action, Result. Focus on a challenge relevant to the role.",
            tip="Keep your answer under 2 minutes and quantify results where possible.",
        ),
        InterviewQuestion(
            question=f"What technical skills make you a strong candidate for the {title} position?",
            type="technical",
            guidance="Highlight skills listed in the job description. Give specific examples of projects.",
            tip="Reference specific technologies mentioned in the job posting.",
        ),
        InterviewQuestion(
            question="How would you handle a situation where project requirements changed significantly mid-sprint?",
            type="situational",
            guidance="Show adaptability and communication skills. Describe your prioritization process.",
            tip="Mention stakeholder communication and impact assessment.",
        ),
        InterviewQuestion(
            question=f"What interests you most about working at {company} and in this specific role?",
            type="role-specific",
            guidance=f"Research {company}'s mission, recent news, and culture. Connect your goals to their values.",
            tip="Be specific: generic answers are a red flag for interviewers.",
        ),
        InterviewQuestion(
            question="Describe your ideal team environment and how you contribute to team success.",
            type="cultural-fit",
            guidance="Show self-awareness and collaboration skills. Give examples of teamwork.",
            tip="Align your answer with the company culture you researched.",
        ),
    ]
