"""
Resume Context

Responsibilities:
- Normalizes pasted resume text and extracts bullets
- Decomposes bullets into verb/task/impact/quantifier fields and rebuilds them
- Scores bullets and rewards edits that add structure
- Holds the analysis session as an explicit value

Owns: Bullet analysis and scoring logic
Never: Reads or writes storage (callers persist sessions)
"""
