"""Prompt template for the EEAT scoring call."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.analysis.scoring import ScoringRequest

SCORING_PROMPT = """\
You are an expert SEO consultant specializing in Google's EEAT (Experience, \
Expertise, Authoritativeness, Trustworthiness) guidelines, helpful content \
guidelines, and Search Quality Rater Guidelines.

Analyze this webpage ({url}) based on the following extracted data:

Title: {title}
Description: {description}
Word Count: {word_count}
Reading Time: {reading_time} minutes
Has Author Info: {has_author_info}
Author: {author}
Has Publication Date: {has_dates}
Date Published: {published_date}
Has External References: {has_references}
Has Schema Markup: {has_schema}
Image Count: {image_count}

Headings Structure:
{headings}

Content Preview:
{content_preview}...

Provide a comprehensive analysis with:

1. Overall score (0-100)
2. EEAT score (0-100) - Evaluate Experience, Expertise, Authoritativeness, and Trustworthiness
3. Helpful content score (0-100) - Evaluate alignment with Google's helpful content guidelines
4. Visual score (0-100) - Evaluate visual presentation and structure

5. EEAT analysis:
   - 3 specific strengths with clear examples from the content
   - 3 specific weaknesses with clear examples from the content
   - 3 specific, actionable recommendations to improve EEAT signals

6. Helpful content analysis:
   - 3 specific strengths with clear examples from the content
   - 3 specific weaknesses with clear examples from the content
   - 3 specific, actionable recommendations to improve helpful content signals

7. Visual analysis:
   - 3 specific strengths related to layout, structure, and readability
   - 3 specific weaknesses related to layout, structure, and readability
   - 3 specific, actionable recommendations to improve visual presentation

Respond with ONLY a JSON object with these exact fields:
{{
  "overallScore": number,
  "eeatScore": number,
  "helpfulContentScore": number,
  "visualScore": number,
  "eeatAnalysis": {{
    "strengths": [string, string, string],
    "weaknesses": [string, string, string],
    "recommendations": [string, string, string]
  }},
  "helpfulContentAnalysis": {{
    "strengths": [string, string, string],
    "weaknesses": [string, string, string],
    "recommendations": [string, string, string]
  }},
  "visualAnalysis": {{
    "strengths": [string, string, string],
    "weaknesses": [string, string, string],
    "recommendations": [string, string, string]
  }}
}}
"""

_NOT_SPECIFIED = "Not specified"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_scoring_prompt(request: ScoringRequest, preview_chars: int = 3000) -> str:
    return SCORING_PROMPT.format(
        url=request.url,
        title=request.title,
        description=request.description,
        word_count=request.word_count,
        reading_time=request.reading_time_minutes,
        has_author_info=_flag(request.has_author_info),
        author=request.author or _NOT_SPECIFIED,
        has_dates=_flag(request.has_dates),
        published_date=request.published_date or _NOT_SPECIFIED,
        has_references=_flag(request.has_references),
        has_schema=_flag(request.has_schema),
        image_count=request.image_count,
        headings="\n".join(request.headings),
        content_preview=request.content[:preview_chars],
    )
