"""
BEACON - Bullet Evaluation And Career-Opportunity Navigation

A deterministic text signal engine for career tooling. Turns free-form prose
(resume bullets, job descriptions) into structured, scored and classified signals.

Architecture:
- Resume Context: Bullet normalization, field seeding, rebuilding and scoring
- Roles Context: Job description sectioning and skill dictionary matching
- Export Context: Markdown and word-processing exports of analysis results
"""

__version__ = "0.1.0"
