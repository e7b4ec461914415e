"""
Roles Context

Responsibilities:
- Segments job descriptions into labeled sections by heading
- Detects skills against a caller-supplied keyword dictionary
- Summarizes role fit (skill contexts, fit coverage)

Owns: Job description decoding logic
Never: Fetches the skill dictionary over the network or persists results
"""
