import json
import logging
import asyncio
from typing import Dict, List, Optional
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError
from app.core.config import settings
from app.models.job import Job
from app.models.test import TestComplexity
from app.schemas.job import JobDetailsResponse
from app.schemas.test import GeneratedQuestion

logger = logging.getLogger(__name__)

DIFFICULTY_BY_COMPLEXITY = {
    TestComplexity.LOW: "beginner to intermediate",
    TestComplexity.MEDIUM: "intermediate to advanced",
    TestComplexity.HIGH: "advanced to expert",
}

ASSESSMENT_SYSTEM_PROMPT = "You are an expert HR assessment designer. Generate high-quality technical questions."
JOB_DETAILS_SYSTEM_PROMPT = "You are an expert HR professional who creates detailed job descriptions."


class QuestionGenerationError(Exception):
    """Raised when the LLM cannot produce a usable question pool or job draft"""
    pass


class QuestionPool(BaseModel):
    questions: List[GeneratedQuestion]


def _get_client() -> AsyncOpenAI:
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY)


def build_question_prompt(job: Job, complexity: TestComplexity, count: int) -> str:
    skills = ", ".join(job.skills or [])
    return f"""Generate exactly {count} multiple-choice questions for a {complexity.value} complexity test for the position of {job.title}. Keep each question concise and focused.

Job Description: {job.description}
Required Skills: {skills}
Experience Level: {job.experience}
Difficulty Level: {DIFFICULTY_BY_COMPLEXITY[complexity]}

For each question, provide:
1. The question text (keep it brief)
2. Four options (A, B, C, D)
3. The correct answer (A, B, C, or D)
4. A brief explanation

Only ONE option may be correct. Mix conceptual and scenario-based questions.

Return ONLY valid JSON with this exact structure:
{{
  "questions": [
    {{
      "question": "Question text here",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": "A",
      "explanation": "Brief explanation"
    }}
  ]
}}"""


def build_job_details_prompt(title: str) -> str:
    return f"""Based on the job title "{title}", generate:
1. A detailed job description (2-3 paragraphs)
2. Required skills (5-8 key skills)
3. Experience requirement (e.g., "2-4 years", "5+ years")

Return ONLY valid JSON with this exact structure:
{{
  "description": "Full job description here",
  "skills": ["Skill 1", "Skill 2", "Skill 3"],
  "experience": "2-4 years"
}}"""


async def _complete_json(
    system_prompt: str,
    user_prompt: str,
    schema: type,
    label: str,
    max_retries: int = 3,
    client: Optional[AsyncOpenAI] = None,
) -> BaseModel:
    """
    Call the chat API in JSON mode and validate the reply against `schema`.
    Retries with exponential backoff (1s, 2s, ...).

    Raises:
        QuestionGenerationError: If every attempt fails
    """
    client = client or _get_client()

    for attempt in range(max_retries):
        try:
            response = await client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                response_format={"type": "json_object"},
                temperature=settings.OPENAI_TEMPERATURE
            )

            content = response.choices[0].message.content
            if not content:
                raise QuestionGenerationError("Empty response from OpenAI")

            return schema.model_validate(json.loads(content))

        except json.JSONDecodeError as e:
            logger.warning(f"Attempt {attempt + 1}/{max_retries} ({label}): Failed to parse JSON: {e}")
            if attempt == max_retries - 1:
                raise QuestionGenerationError(f"Invalid JSON after {max_retries} attempts: {e}")

        except ValidationError as e:
            logger.warning(f"Attempt {attempt + 1}/{max_retries} ({label}): Response failed validation: {e}")
            if attempt == max_retries - 1:
                raise QuestionGenerationError(f"Invalid {label} after {max_retries} attempts: {e}")

        except Exception as e:
            logger.warning(f"Attempt {attempt + 1}/{max_retries} ({label}): Generation error: {e}")
            if attempt == max_retries - 1:
                raise QuestionGenerationError(f"Failed after {max_retries} attempts: {e}")

        if attempt < max_retries - 1:
            wait_time = 2 ** attempt
            logger.info(f"Retrying in {wait_time} seconds...")
            await asyncio.sleep(wait_time)

    raise QuestionGenerationError(f"Failed to generate {label} after {max_retries} attempts")


async def generate_question_pool(
    job: Job,
    complexity: TestComplexity,
    count: Optional[int] = None,
    max_retries: int = 3,
    client: Optional[AsyncOpenAI] = None,
) -> List[Dict]:
    """
    Generate the question pool for a test.

    Returns:
        List of question dicts with correct_answer as a zero-based index

    Raises:
        QuestionGenerationError: If generation or validation fails after all retries
    """
    count = count or settings.QUESTION_POOL_SIZE

    pool = await _complete_json(
        ASSESSMENT_SYSTEM_PROMPT,
        build_question_prompt(job, complexity, count),
        QuestionPool,
        "question pool",
        max_retries=max_retries,
        client=client,
    )
    if not pool.questions:
        raise QuestionGenerationError("LLM returned no questions")

    if len(pool.questions) != count:
        logger.warning(f"Requested {count} questions for job {job.id}, LLM returned {len(pool.questions)}")

    logger.info(f"Generated {len(pool.questions)} {complexity.value} questions for job {job.id}: {job.title}")
    return [question.model_dump() for question in pool.questions]


async def generate_job_details(
    title: str,
    max_retries: int = 3,
    client: Optional[AsyncOpenAI] = None,
) -> JobDetailsResponse:
    """
    Draft description, skills and experience for a job title.

    Raises:
        QuestionGenerationError: If generation fails after all retries
    """
    details = await _complete_json(
        JOB_DETAILS_SYSTEM_PROMPT,
        build_job_details_prompt(title),
        JobDetailsResponse,
        "job details",
        max_retries=max_retries,
        client=client,
    )
    logger.info(f"Generated job details for: {title}")
    return details
