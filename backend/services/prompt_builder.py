"""Prompt templates for Gemini API calls."""


def build_cv_parse_prompt(cv_text: str) -> str:
    """Structured extraction of skills, experience, education and summary."""
    return f"""You are a CV/resume parser. Extract structured data from the CV text.

Return a JSON object with these fields:
- skills: array of skill strings
- experience: array of {{ "role", "company", "duration", "description" }}
- education: array of {{ "degree", "institution", "year" }}
- summary: a brief professional summary (2-3 sentences)

Use empty strings or empty arrays for anything the CV does not mention.
Return ONLY valid JSON, no markdown or extra text.

CV:
---
{cv_text}
---"""


def _job_context(description: str | None) -> str:
    if not description:
        return ""
    return f"\nJob description:\n---\n{description}\n---\n"


def build_cover_letter_prompt(
    title: str, company: str, skills: str, summary: str, tone: str,
    description: str | None = None,
) -> str:
    return f"""You are a professional cover letter writer.

Return a JSON object with these fields:
- subject: email subject line for the application
- body: the full cover letter text
- tone: the tone used ("{tone}")

The tone should be: {tone}. Return ONLY valid JSON, no markdown or extra text.

Write a cover letter for the {title} position at {company}.
{_job_context(description)}
Candidate skills: {skills}
Candidate summary: {summary}"""


def build_tailored_cv_prompt(
    title: str, company: str, skills: str, experience: str,
    description: str | None = None,
) -> str:
    """Rewrite a CV for one job, with an ATS compatibility estimate."""
    return f"""You are a professional CV/resume writer.

Return a JSON object with these fields:
- summary: a tailored professional summary (2-3 sentences)
- skills: array of relevant skills, most relevant to the job first
- experience: array of {{ "role", "company", "duration", "highlights": array of strings }}
- ats_score: estimated ATS compatibility score (integer 0-100)

Return ONLY valid JSON, no markdown or extra text.

Tailor this CV for the {title} position at {company}.
{_job_context(description)}
Current skills: {skills}
Current experience:
{experience}"""


def build_interview_questions_prompt(
    title: str, company: str, description: str | None = None
) -> str:
    return f"""You are an interview preparation expert. Generate 5 interview questions.

Return a JSON object with a "questions" array. Each question has:
- question: the interview question text
- type: one of "behavioral", "technical", "situational", "role-specific", "cultural-fit"
- guidance: advice on how to answer (1-2 sentences)
- tip: a quick tip (1 sentence)

Return ONLY valid JSON, no markdown or extra text.

Generate interview questions for the {title} position at {company}.
{_job_context(description)}"""
