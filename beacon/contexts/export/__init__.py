"""
Export Context

Renders resume sessions and role decodings as Markdown (Jinja2 templates) and
packages plain text as a minimal DOCX archive.
"""
