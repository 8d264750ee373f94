"""Fixed sample report served when ``MOCK_ANALYSIS`` is enabled."""

from __future__ import annotations

from src.api.schemas import AnalysisBlock, AnalysisResponse, PageMetadata


def sample_response(url: str) -> AnalysisResponse:
    return AnalysisResponse(
        url=url,
        overall_score=72,
        eeat_score=68,
        helpful_content_score=75,
        visual_score=73,
        metadata=PageMetadata(
            title="Example Website - Homepage",
            description="This is an example website for demonstration purposes.",
            word_count=1250,
            reading_time=6,
            has_author_info=True,
            has_dates=True,
            has_references=True,
            has_schema=False,
        ),
        eeat_analysis=AnalysisBlock(
            strengths=[
                "Clear author credentials and expertise displayed on article pages",
                "Content includes citations to authoritative sources",
                "About page provides detailed company background and team expertise",
            ],
            weaknesses=[
                "Limited evidence of first-hand experience in some topic areas",
                "Inconsistent attribution of sources across different content sections",
                "Missing credentials for some content contributors",
            ],
            recommendations=[
                "Add author bios with relevant qualifications to all content pieces",
                "Include more case studies and first-hand experiences to demonstrate expertise",
                "Implement structured data markup for author expertise and organization credentials",
            ],
        ),
        helpful_content_analysis=AnalysisBlock(
            strengths=[
                "Content addresses specific user questions comprehensively",
                "Clear, scannable structure with helpful headings and subheadings",
                "Provides unique insights not found in competing content",
            ],
            weaknesses=[
                "Some content appears to be written primarily for search engines rather than users",
                "Excessive keyword usage in certain sections feels unnatural",
                "Limited use of helpful multimedia elements to enhance understanding",
            ],
            recommendations=[
                "Revise content to focus on solving user problems rather than keyword optimization",
                "Add more practical examples, images, and videos to illustrate key points",
                "Expand content depth in areas where user questions aren't fully addressed",
            ],
        ),
        visual_analysis=AnalysisBlock(
            strengths=[
                "Clean, professional layout that enhances content readability",
                "Consistent branding elements establish visual trustworthiness",
                "Good use of white space and typography hierarchy",
            ],
            weaknesses=[
                "Mobile responsiveness issues on some content sections",
                "Inconsistent image quality throughout the site",
                "Some interactive elements lack clear visual affordances",
            ],
            recommendations=[
                "Improve mobile layout, especially for tables and complex content",
                "Standardize image quality and implement lazy loading for performance",
                "Enhance visual cues for interactive elements to improve usability",
            ],
        ),
    )
